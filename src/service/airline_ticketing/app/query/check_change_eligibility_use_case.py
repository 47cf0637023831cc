from datetime import datetime, timezone
from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import TicketNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.change_eligibility_checker import (
    check_change_eligibility,
)
from src.service.airline_ticketing.domain.value_object.change_eligibility import (
    ChangeEligibility,
)


class CheckChangeEligibilityUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self, *, ticket_id: int, user_id: int, now: datetime | None = None
    ) -> ChangeEligibility:
        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_id(ticket_id)
            if not ticket or ticket.user_id != user_id:
                raise TicketNotFoundError()
            trip = await self.uow.trip_repo.get_by_id(ticket.trip_id)

        return check_change_eligibility(
            ticket=ticket,
            trip=trip,
            now=now or datetime.now(timezone.utc),
            min_hours_before_departure=settings.TICKET_CHANGE_MIN_HOURS_BEFORE_DEPARTURE,
        )
