from datetime import datetime, timezone
from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger


class PurgeExpiredPendingChangesUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, now: datetime | None = None) -> int:
        async with self.uow:
            purged = await self.uow.pending_ticket_change_repo.delete_expired(
                now=now or datetime.now(timezone.utc)
            )
            await self.uow.commit()

        if purged:
            Logger.base.info(f'[TICKET-CHANGE] purged {purged} expired pending change(s)')
        return purged
