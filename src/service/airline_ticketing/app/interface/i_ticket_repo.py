from abc import abstractmethod
from typing import Optional

from src.service.airline_ticketing.app.interface.i_repository import IRepository
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass


class ITicketRepo(IRepository[Ticket]):
    """Ticket persistence plus the seat availability queries"""

    @abstractmethod
    async def get_by_id(self, entity_id: int, *, for_update: bool = False) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def get_by_pnr(self, *, pnr: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def pnr_exists(self, pnr: str) -> bool:
        pass

    @abstractmethod
    async def is_seat_available(
        self, *, trip_id: int, seat_number: str, exclude_ticket_id: int | None = None
    ) -> bool:
        """True when no active ticket on the trip holds the seat (case-insensitive)"""
        pass

    @abstractmethod
    async def list_booked_seats(
        self, *, trip_id: int, seat_class: SeatClass | None = None
    ) -> list[str]:
        pass
