"""
Unit of Work Pattern - one database session and its repositories

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories share the UoW session
- Use cases coordinate several repositories through one UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session
from src.platform.exception.exceptions import ConflictError


if TYPE_CHECKING:
    from src.service.airline_ticketing.app.interface.i_payment_repo import IPaymentRepo
    from src.service.airline_ticketing.app.interface.i_pending_ticket_change_repo import (
        IPendingTicketChangeRepo,
    )
    from src.service.airline_ticketing.app.interface.i_ticket_change_history_repo import (
        ITicketChangeHistoryRepo,
    )
    from src.service.airline_ticketing.app.interface.i_ticket_repo import ITicketRepo
    from src.service.airline_ticketing.app.interface.i_trip_repo import ITripRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the airline ticketing service

    Leaving the block without commit() rolls everything back.

    Usage:
        async with uow:
            ticket = await uow.ticket_repo.get_by_id(ticket_id, for_update=True)
            await uow.ticket_repo.update(...)
            await uow.commit()
    """

    trip_repo: ITripRepo
    ticket_repo: ITicketRepo
    ticket_change_history_repo: ITicketChangeHistoryRepo
    payment_repo: IPaymentRepo
    pending_ticket_change_repo: IPendingTicketChangeRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from src.service.airline_ticketing.driven_adapter.repo.payment_repo_impl import (
            PaymentRepoImpl,
        )
        from src.service.airline_ticketing.driven_adapter.repo.pending_ticket_change_repo_impl import (
            PendingTicketChangeRepoImpl,
        )
        from src.service.airline_ticketing.driven_adapter.repo.ticket_change_history_repo_impl import (
            TicketChangeHistoryRepoImpl,
        )
        from src.service.airline_ticketing.driven_adapter.repo.ticket_repo_impl import (
            TicketRepoImpl,
        )
        from src.service.airline_ticketing.driven_adapter.repo.trip_repo_impl import TripRepoImpl

        # Create repositories with shared session
        self.trip_repo = TripRepoImpl(session=self.session)
        self.ticket_repo = TicketRepoImpl(session=self.session)
        self.ticket_change_history_repo = TicketChangeHistoryRepoImpl(session=self.session)
        self.payment_repo = PaymentRepoImpl(session=self.session)
        self.pending_ticket_change_repo = PendingTicketChangeRepoImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f'Constraint violated: {e.orig}') from e

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Usage:
        @classmethod
        def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
            return cls(uow=uow)
    """
    return SqlAlchemyUnitOfWork(session)
