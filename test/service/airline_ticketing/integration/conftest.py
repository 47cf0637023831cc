"""
SQLite-backed fixtures for integration tests

Every test gets its own database file, created with the production metadata
(including the partial unique seat index and the seat counter checks).
"""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

from src.platform.database.orm_db_setting import Database, create_db_and_tables
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.driven_adapter.model.company_model import CompanyModel


@pytest.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    database = Database(database_url=f'sqlite+aiosqlite:///{tmp_path}/airline_test.db')
    await create_db_and_tables(database.engine)
    yield database
    await database.dispose()


@pytest.fixture
def run_in_uow(database: Database) -> Callable:
    """run_in_uow(fn) -> await fn(uow) inside a fresh session and commits"""

    async def _run(fn):
        async with database.session() as session:
            uow = SqlAlchemyUnitOfWork(session)
            async with uow:
                result = await fn(uow)
                await uow.commit()
            return result

    return _run


@pytest.fixture
def departure() -> datetime:
    # Controllers use the wall clock, so seeded flights are relative to it
    return datetime.now(timezone.utc).replace(microsecond=0) + timedelta(hours=48)


@pytest.fixture
async def seeded(database: Database, run_in_uow: Callable, departure: datetime) -> dict:
    """
    company 1 Vietnam Airlines
    trip 1: Economy 100 (30 left), trip 2: Economy 120 (5 left), same route,
            trip 2 carries a 10% round-trip discount
    ticket 10: user 7, Economy on trip 1, seat 2A, PNR AAA222
    """
    async with database.session() as session:
        session.add(CompanyModel(id=1, name='Vietnam Airlines'))
        await session.commit()

    def trip(trip_id: int, **overrides) -> Trip:
        values = {
            'id': trip_id,
            'company_id': 1,
            'airline_name': 'Vietnam Airlines',
            'plane_name': 'A321',
            'from_city': 'Hanoi',
            'to_city': 'Da Nang',
            'departure_time': departure,
            'arrival_time': departure + timedelta(hours=1, minutes=20),
            'economy_price': Decimal('100.00'),
            'business_price': Decimal('250.00'),
            'first_class_price': Decimal('500.00'),
            'economy_seats': 30,
            'business_seats': 8,
            'first_class_seats': 4,
        }
        values.update(overrides)
        return Trip(**values)

    async def seed(uow):
        await uow.trip_repo.add(trip(1))
        await uow.trip_repo.add(
            trip(
                2,
                economy_price=Decimal('120.00'),
                economy_seats=5,
                departure_time=departure + timedelta(days=1),
                arrival_time=departure + timedelta(days=1, hours=1),
                round_trip_discount_percent=Decimal('10'),
            )
        )
        return await uow.ticket_repo.add(
            Ticket(
                id=10,
                trip_id=1,
                user_id=7,
                seat_class=SeatClass.ECONOMY,
                total_price=Decimal('100.00'),
                booking_date=departure - timedelta(days=10),
                payment_status=PaymentStatus.SUCCESS,
                seat_number='2A',
                passenger_name='Nguyen Van A',
                pnr='AAA222',
            )
        )

    ticket = await run_in_uow(seed)
    return {'ticket': ticket, 'departure': departure}
