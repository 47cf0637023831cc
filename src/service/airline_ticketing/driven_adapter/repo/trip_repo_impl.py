from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Select, select, update

from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.interface.i_trip_repo import ITripRepo
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.driven_adapter.model.company_model import CompanyModel
from src.service.airline_ticketing.driven_adapter.model.trip_model import TripModel
from src.service.airline_ticketing.driven_adapter.repo.sqlalchemy_repo import (
    SqlAlchemyRepo,
    as_utc,
)


_SEAT_COUNTER_COLUMN = {
    SeatClass.ECONOMY: TripModel.economy_seats,
    SeatClass.BUSINESS: TripModel.business_seats,
    SeatClass.FIRST_CLASS: TripModel.first_class_seats,
}


class TripRepoImpl(SqlAlchemyRepo[TripModel, Trip], ITripRepo):
    model = TripModel

    def _select_with_airline(self) -> Select[Any]:
        return (
            select(TripModel, CompanyModel.name)
            .join(CompanyModel, CompanyModel.id == TripModel.company_id)
            .execution_options(populate_existing=True)
        )

    @staticmethod
    def _to_trip(db_trip: TripModel, airline_name: str) -> Trip:
        return Trip(
            id=db_trip.id,
            company_id=db_trip.company_id,
            airline_name=airline_name,
            plane_name=db_trip.plane_name,
            from_city=db_trip.from_city,
            to_city=db_trip.to_city,
            departure_time=as_utc(db_trip.departure_time),  # type: ignore[arg-type]
            arrival_time=as_utc(db_trip.arrival_time),  # type: ignore[arg-type]
            economy_price=db_trip.economy_price,
            business_price=db_trip.business_price,
            first_class_price=db_trip.first_class_price,
            economy_seats=db_trip.economy_seats,
            business_seats=db_trip.business_seats,
            first_class_seats=db_trip.first_class_seats,
            round_trip_discount_percent=db_trip.round_trip_discount_percent,
        )

    def _to_values(self, entity: Trip) -> dict[str, Any]:
        values = {
            'company_id': entity.company_id,
            'plane_name': entity.plane_name,
            'from_city': entity.from_city,
            'to_city': entity.to_city,
            'departure_time': entity.departure_time,
            'arrival_time': entity.arrival_time,
            'economy_price': entity.economy_price,
            'business_price': entity.business_price,
            'first_class_price': entity.first_class_price,
            'economy_seats': entity.economy_seats,
            'business_seats': entity.business_seats,
            'first_class_seats': entity.first_class_seats,
            'round_trip_discount_percent': entity.round_trip_discount_percent,
        }
        if entity.id:
            values['id'] = entity.id
        return values

    @Logger.io
    async def get_by_id(self, entity_id: int, *, for_update: bool = False) -> Optional[Trip]:
        stmt = self._select_with_airline().where(TripModel.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update(of=TripModel)
        row = (await self.session.execute(stmt)).one_or_none()
        return self._to_trip(row[0], row[1]) if row else None

    async def find(self, **criteria: Any) -> list[Trip]:
        stmt = self._select_with_airline().where(*self._where(criteria)).order_by(TripModel.id)
        result = await self.session.execute(stmt)
        return [self._to_trip(db_trip, airline_name) for db_trip, airline_name in result.all()]

    async def add(self, entity: Trip) -> Trip:
        db_trip = TripModel(**self._to_values(entity))
        self.session.add(db_trip)
        await self._flush()
        return self._to_trip(db_trip, entity.airline_name)

    @Logger.io
    async def find_route_discount(
        self, *, company_id: int, from_city: str, to_city: str
    ) -> Optional[Decimal]:
        stmt = (
            select(TripModel.round_trip_discount_percent)
            .where(
                TripModel.company_id == company_id,
                TripModel.from_city == from_city,
                TripModel.to_city == to_city,
                TripModel.round_trip_discount_percent.is_not(None),
            )
            .order_by(TripModel.id)
            .limit(1)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    @Logger.io
    async def decrement_seats(self, *, trip_id: int, seat_class: SeatClass) -> bool:
        column = _SEAT_COUNTER_COLUMN[seat_class]
        result = await self.session.execute(
            update(TripModel)
            .where(TripModel.id == trip_id, column > 0)
            .values({column: column - 1})
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1  # type: ignore[attr-defined]

    @Logger.io
    async def increment_seats(self, *, trip_id: int, seat_class: SeatClass) -> None:
        column = _SEAT_COUNTER_COLUMN[seat_class]
        await self.session.execute(
            update(TripModel)
            .where(TripModel.id == trip_id)
            .values({column: column + 1})
            .execution_options(synchronize_session=False)
        )
