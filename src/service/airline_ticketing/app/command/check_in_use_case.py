from datetime import datetime, timedelta, timezone
from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    CheckInNotAllowedError,
    TicketNotFoundError,
    TripNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.command.assign_seat_use_case import AssignSeatUseCase
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus


SEAT_REQUIRED_MESSAGE = 'Please select a seat before checking in.'


def check_in_denial_reason(*, ticket: Ticket, trip: Trip, now: datetime) -> str | None:
    if ticket.is_cancelled:
        return 'Ticket has been cancelled.'
    if ticket.is_checked_in:
        return 'Ticket is already checked in.'
    if ticket.payment_status != PaymentStatus.SUCCESS:
        return 'Ticket has not been paid.'

    opens_at = trip.departure_time - timedelta(hours=settings.CHECK_IN_OPEN_HOURS)
    closes_at = trip.departure_time - timedelta(minutes=settings.CHECK_IN_CLOSE_MINUTES)
    if now < opens_at:
        return f'Online check-in opens {settings.CHECK_IN_OPEN_HOURS} hours before departure.'
    if now > closes_at:
        return (
            f'Online check-in closes {settings.CHECK_IN_CLOSE_MINUTES} minutes before departure.'
        )
    return None


class CheckInUseCase:
    """
    Online check-in.

    A seat passed in that differs from the current one goes through
    AssignSeatUseCase first, so seat-taken and invalid-seat errors surface
    unchanged.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, assign_seat: AssignSeatUseCase) -> None:
        self.uow = uow
        self.assign_seat = assign_seat

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow, assign_seat=AssignSeatUseCase(uow=uow))

    @Logger.io
    async def execute(
        self,
        *,
        ticket_id: int,
        user_id: int,
        seat_number: str | None = None,
        now: datetime | None = None,
    ) -> Ticket:
        now = now or datetime.now(timezone.utc)

        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_id(ticket_id)
            if not ticket or ticket.user_id != user_id:
                raise TicketNotFoundError()
            trip = await self.uow.trip_repo.get_by_id(ticket.trip_id)
            if not trip:
                raise TripNotFoundError()

        if reason := check_in_denial_reason(ticket=ticket, trip=trip, now=now):
            raise CheckInNotAllowedError(reason)

        if seat_number and not ticket.holds_seat(seat_number):
            ticket = await self.assign_seat.change_seat(
                ticket_id=ticket_id, new_seat_number=seat_number, user_id=user_id
            )
        if not ticket.has_seat:
            raise CheckInNotAllowedError(SEAT_REQUIRED_MESSAGE)

        async with self.uow:
            locked = await self.uow.ticket_repo.get_by_id(ticket_id, for_update=True)
            if not locked:
                raise TicketNotFoundError()
            if reason := check_in_denial_reason(ticket=locked, trip=trip, now=now):
                raise CheckInNotAllowedError(reason)
            checked_in = await self.uow.ticket_repo.update(locked.check_in(now=now))
            await self.uow.commit()

        Logger.base.info(
            f'[CHECK-IN] ticket {ticket_id} checked in on seat {checked_in.seat_number}'
        )
        return checked_in
