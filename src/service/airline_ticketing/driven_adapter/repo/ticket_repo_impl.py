from typing import Any, Optional

from sqlalchemy import func, select

from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.enum.ticket_type import TicketType
from src.service.airline_ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.airline_ticketing.driven_adapter.repo.sqlalchemy_repo import (
    SqlAlchemyRepo,
    as_utc,
)


class TicketRepoImpl(SqlAlchemyRepo[TicketModel, Ticket], ITicketRepo):
    model = TicketModel

    def _to_entity(self, db_ticket: TicketModel) -> Ticket:
        return Ticket(
            id=db_ticket.id,
            trip_id=db_ticket.trip_id,
            user_id=db_ticket.user_id,
            seat_class=SeatClass(db_ticket.seat_class),
            seat_number=db_ticket.seat_number or '',
            passenger_name=db_ticket.passenger_name,
            booking_date=as_utc(db_ticket.booking_date),  # type: ignore[arg-type]
            payment_status=PaymentStatus(db_ticket.payment_status),
            pnr=db_ticket.pnr,
            is_checked_in=db_ticket.is_checked_in,
            check_in_time=as_utc(db_ticket.check_in_time),
            is_cancelled=db_ticket.is_cancelled,
            cancelled_at=as_utc(db_ticket.cancelled_at),
            cancellation_reason=db_ticket.cancellation_reason,
            ticket_type=TicketType(db_ticket.ticket_type),
            outbound_ticket_id=db_ticket.outbound_ticket_id,
            return_ticket_id=db_ticket.return_ticket_id,
            booking_group_id=db_ticket.booking_group_id,
            total_price=db_ticket.total_price,
            meal_option=db_ticket.meal_option,
            baggage_option=db_ticket.baggage_option,
            add_on_price=db_ticket.add_on_price,
        )

    def _to_values(self, entity: Ticket) -> dict[str, Any]:
        values = {
            'trip_id': entity.trip_id,
            'user_id': entity.user_id,
            'seat_class': entity.seat_class.value,
            'seat_number': entity.seat_number.upper(),
            'passenger_name': entity.passenger_name,
            'booking_date': entity.booking_date,
            'payment_status': entity.payment_status.value,
            'pnr': entity.pnr,
            'is_checked_in': entity.is_checked_in,
            'check_in_time': entity.check_in_time,
            'is_cancelled': entity.is_cancelled,
            'cancelled_at': entity.cancelled_at,
            'cancellation_reason': entity.cancellation_reason,
            'ticket_type': entity.ticket_type.value,
            'outbound_ticket_id': entity.outbound_ticket_id,
            'return_ticket_id': entity.return_ticket_id,
            'booking_group_id': entity.booking_group_id,
            'total_price': entity.total_price,
            'meal_option': entity.meal_option,
            'baggage_option': entity.baggage_option,
            'add_on_price': entity.add_on_price,
        }
        if entity.id:
            values['id'] = entity.id
        return values

    @Logger.io
    async def get_by_pnr(self, *, pnr: str) -> Optional[Ticket]:
        stmt = (
            select(TicketModel)
            .where(TicketModel.pnr == pnr.strip().upper())
            .execution_options(populate_existing=True)
        )
        db_ticket = (await self.session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(db_ticket) if db_ticket else None

    async def pnr_exists(self, pnr: str) -> bool:
        return await self.exists(pnr=pnr)

    @Logger.io
    async def is_seat_available(
        self, *, trip_id: int, seat_number: str, exclude_ticket_id: int | None = None
    ) -> bool:
        stmt = (
            select(func.count())
            .select_from(TicketModel)
            .where(
                TicketModel.trip_id == trip_id,
                TicketModel.is_cancelled.is_(False),
                func.upper(TicketModel.seat_number) == seat_number.strip().upper(),
            )
        )
        if exclude_ticket_id is not None:
            stmt = stmt.where(TicketModel.id != exclude_ticket_id)
        return (await self.session.execute(stmt)).scalar_one() == 0

    @Logger.io
    async def list_booked_seats(
        self, *, trip_id: int, seat_class: SeatClass | None = None
    ) -> list[str]:
        stmt = select(TicketModel.seat_number).where(
            TicketModel.trip_id == trip_id,
            TicketModel.is_cancelled.is_(False),
            TicketModel.seat_number != '',
        )
        if seat_class is not None:
            stmt = stmt.where(TicketModel.seat_class == seat_class.value)
        result = await self.session.execute(stmt)
        return [seat_number.upper() for seat_number in result.scalars().all()]
