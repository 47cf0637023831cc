from abc import abstractmethod
from decimal import Decimal
from typing import Optional

from src.service.airline_ticketing.app.interface.i_repository import IRepository
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass


class ITripRepo(IRepository[Trip]):
    @abstractmethod
    async def get_by_id(self, entity_id: int, *, for_update: bool = False) -> Optional[Trip]:
        pass

    @abstractmethod
    async def find_route_discount(
        self, *, company_id: int, from_city: str, to_city: str
    ) -> Optional[Decimal]:
        """Discount of the first trip on the route that has one set"""
        pass

    @abstractmethod
    async def decrement_seats(self, *, trip_id: int, seat_class: SeatClass) -> bool:
        """Take one seat off the class counter; False when the counter is already 0"""
        pass

    @abstractmethod
    async def increment_seats(self, *, trip_id: int, seat_class: SeatClass) -> None:
        pass
