from datetime import datetime
from typing import Any, Optional

from sqlalchemy import delete, select

from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.interface.i_pending_ticket_change_repo import (
    IPendingTicketChangeRepo,
)
from src.service.airline_ticketing.domain.entity.pending_ticket_change_entity import (
    PendingTicketChange,
)
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.driven_adapter.model.pending_ticket_change_model import (
    PendingTicketChangeModel,
)
from src.service.airline_ticketing.driven_adapter.repo.sqlalchemy_repo import (
    SqlAlchemyRepo,
    as_utc,
)


class PendingTicketChangeRepoImpl(
    SqlAlchemyRepo[PendingTicketChangeModel, PendingTicketChange], IPendingTicketChangeRepo
):
    model = PendingTicketChangeModel

    def _to_entity(self, db_pending: PendingTicketChangeModel) -> PendingTicketChange:
        return PendingTicketChange(
            id=db_pending.id,
            token=db_pending.token,
            ticket_id=db_pending.ticket_id,
            user_id=db_pending.user_id,
            new_trip_id=db_pending.new_trip_id,
            target_seat_class=SeatClass(db_pending.target_seat_class),
            change_fee=db_pending.change_fee,
            price_difference=db_pending.price_difference,
            total_due=db_pending.total_due,
            refund_amount=db_pending.refund_amount,
            reason=db_pending.reason,
            created_at=as_utc(db_pending.created_at),  # type: ignore[arg-type]
            expires_at=as_utc(db_pending.expires_at),  # type: ignore[arg-type]
        )

    def _to_values(self, entity: PendingTicketChange) -> dict[str, Any]:
        return {
            'token': entity.token,
            'ticket_id': entity.ticket_id,
            'user_id': entity.user_id,
            'new_trip_id': entity.new_trip_id,
            'target_seat_class': entity.target_seat_class.value,
            'change_fee': entity.change_fee,
            'price_difference': entity.price_difference,
            'total_due': entity.total_due,
            'refund_amount': entity.refund_amount,
            'reason': entity.reason,
            'created_at': entity.created_at,
            'expires_at': entity.expires_at,
        }

    @Logger.io
    async def get_by_token(self, *, token: str) -> Optional[PendingTicketChange]:
        stmt = select(PendingTicketChangeModel).where(PendingTicketChangeModel.token == token)
        db_pending = (await self.session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(db_pending) if db_pending else None

    async def delete_for_ticket(self, *, ticket_id: int) -> int:
        result = await self.session.execute(
            delete(PendingTicketChangeModel)
            .where(PendingTicketChangeModel.ticket_id == ticket_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def delete_expired(self, *, now: datetime) -> int:
        result = await self.session.execute(
            delete(PendingTicketChangeModel)
            .where(PendingTicketChangeModel.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
