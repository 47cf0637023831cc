from datetime import datetime, timezone
from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    ChangeNotEligibleError,
    TicketNotFoundError,
    TripNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.change_amount_calculator import quote_change
from src.service.airline_ticketing.domain.change_eligibility_checker import (
    check_change_eligibility,
)
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote


class CalculateChangeAmountUseCase:
    """Quote a change (fee, difference, total due, refund) without touching anything"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        ticket_id: int,
        user_id: int,
        new_trip_id: int,
        new_seat_class: SeatClass | str | None = None,
        now: datetime | None = None,
    ) -> ChangeQuote:
        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_id(ticket_id)
            if not ticket or ticket.user_id != user_id:
                raise TicketNotFoundError()
            trip = await self.uow.trip_repo.get_by_id(ticket.trip_id)
            new_trip = await self.uow.trip_repo.get_by_id(new_trip_id)

        eligibility = check_change_eligibility(
            ticket=ticket,
            trip=trip,
            now=now or datetime.now(timezone.utc),
            min_hours_before_departure=settings.TICKET_CHANGE_MIN_HOURS_BEFORE_DEPARTURE,
        )
        if not eligibility.allowed or trip is None:
            raise ChangeNotEligibleError(eligibility.reason or 'Ticket cannot be changed.')
        if not new_trip:
            raise TripNotFoundError('The selected flight was not found')

        return quote_change(
            original_ticket=ticket,
            original_trip=trip,
            new_trip=new_trip,
            change_fee=eligibility.change_fee,
            new_seat_class=new_seat_class,
        )
