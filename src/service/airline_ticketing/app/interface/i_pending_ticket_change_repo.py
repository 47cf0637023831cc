from abc import abstractmethod
from datetime import datetime
from typing import Optional

from src.service.airline_ticketing.app.interface.i_repository import IRepository
from src.service.airline_ticketing.domain.entity.pending_ticket_change_entity import (
    PendingTicketChange,
)


class IPendingTicketChangeRepo(IRepository[PendingTicketChange]):
    @abstractmethod
    async def get_by_token(self, *, token: str) -> Optional[PendingTicketChange]:
        pass

    @abstractmethod
    async def delete_for_ticket(self, *, ticket_id: int) -> int:
        pass

    @abstractmethod
    async def delete_expired(self, *, now: datetime) -> int:
        pass
