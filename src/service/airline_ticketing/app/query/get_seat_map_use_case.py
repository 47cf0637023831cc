from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import TripNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.seat_map_generator import generate_seat_map
from src.service.airline_ticketing.domain.value_object.seat_map import SeatMap


class GetSeatMapUseCase:
    """Builds the seat map from the live booked-seat set on every call"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io(truncate_content=True)
    async def execute(self, *, trip_id: int, seat_class: SeatClass | str) -> SeatMap:
        seat_class = SeatClass.parse(seat_class)

        async with self.uow:
            trip = await self.uow.trip_repo.get_by_id(trip_id)
            if not trip:
                raise TripNotFoundError()
            booked = await self.uow.ticket_repo.list_booked_seats(
                trip_id=trip_id, seat_class=seat_class
            )

        return generate_seat_map(
            trip_id=trip_id,
            seat_class=seat_class,
            total_seats=trip.remaining_seats(seat_class),
            booked_seat_numbers=booked,
        )
