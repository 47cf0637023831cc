from typing import Any

from src.service.airline_ticketing.app.interface.i_ticket_change_history_repo import (
    ITicketChangeHistoryRepo,
)
from src.service.airline_ticketing.domain.entity.ticket_change_history_entity import (
    TicketChangeHistory,
)
from src.service.airline_ticketing.domain.enum.change_status import ChangeStatus
from src.service.airline_ticketing.driven_adapter.model.ticket_change_history_model import (
    TicketChangeHistoryModel,
)
from src.service.airline_ticketing.driven_adapter.repo.sqlalchemy_repo import (
    SqlAlchemyRepo,
    as_utc,
)


class TicketChangeHistoryRepoImpl(
    SqlAlchemyRepo[TicketChangeHistoryModel, TicketChangeHistory], ITicketChangeHistoryRepo
):
    model = TicketChangeHistoryModel

    def _to_entity(self, db_history: TicketChangeHistoryModel) -> TicketChangeHistory:
        return TicketChangeHistory(
            id=db_history.id,
            original_ticket_id=db_history.original_ticket_id,
            new_ticket_id=db_history.new_ticket_id,
            change_date=as_utc(db_history.change_date),  # type: ignore[arg-type]
            change_fee=db_history.change_fee,
            price_difference=db_history.price_difference,
            total_amount_paid=db_history.total_amount_paid,
            change_reason=db_history.change_reason,
            status=ChangeStatus(db_history.status),
        )

    def _to_values(self, entity: TicketChangeHistory) -> dict[str, Any]:
        return {
            'original_ticket_id': entity.original_ticket_id,
            'new_ticket_id': entity.new_ticket_id,
            'change_date': entity.change_date,
            'change_fee': entity.change_fee,
            'price_difference': entity.price_difference,
            'total_amount_paid': entity.total_amount_paid,
            'change_reason': entity.change_reason,
            'status': entity.status.value,
        }

    async def update(self, entity: TicketChangeHistory) -> TicketChangeHistory:
        raise NotImplementedError('Ticket change history is append-only')

    async def delete(self, entity_id: int) -> None:
        raise NotImplementedError('Ticket change history is append-only')

