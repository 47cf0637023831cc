from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import TripNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.fare_policy import round_trip_price
from src.service.airline_ticketing.domain.value_object.round_trip_price_breakdown import (
    RoundTripPriceBreakdown,
)


class CalculateRoundTripPriceUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        outbound_trip_id: int,
        return_trip_id: int,
        outbound_class: SeatClass | str,
        return_class: SeatClass | str | None = None,
    ) -> RoundTripPriceBreakdown:
        async with self.uow:
            outbound_trip = await self.uow.trip_repo.get_by_id(outbound_trip_id)
            if not outbound_trip:
                raise TripNotFoundError('Outbound flight not found')
            return_trip = await self.uow.trip_repo.get_by_id(return_trip_id)
            if not return_trip:
                raise TripNotFoundError('Return flight not found')

            route_discount = None
            if outbound_trip.round_trip_discount_percent is None:
                route_discount = await self.uow.trip_repo.find_route_discount(
                    company_id=outbound_trip.company_id,
                    from_city=outbound_trip.from_city,
                    to_city=outbound_trip.to_city,
                )

        return round_trip_price(
            outbound_trip=outbound_trip,
            return_trip=return_trip,
            outbound_class=outbound_class,
            return_class=return_class,
            route_discount_percent=route_discount,
        )
