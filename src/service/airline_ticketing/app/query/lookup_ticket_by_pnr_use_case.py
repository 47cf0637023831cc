from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import DomainError, TicketNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.pnr import is_valid_pnr_format


class LookupTicketByPnrUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, pnr: str, user_id: int) -> Ticket:
        if not is_valid_pnr_format(pnr):
            raise DomainError('Invalid PNR format. A PNR is 6 letters and digits.')

        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_pnr(pnr=pnr)

        # Someone else's PNR looks exactly like an unknown one
        if not ticket or ticket.user_id != user_id:
            raise TicketNotFoundError('No ticket found for this PNR')
        return ticket
