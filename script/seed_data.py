#!/usr/bin/env python3
"""
Database Seed Script
Populate demo flights and bookings

Features:
1. Create Tables - same metadata the API creates on startup
2. Create Airline - one company row
3. Create Trips - a Hanoi <-> Ho Chi Minh City schedule for the coming days
4. Create Tickets - a few paid economy bookings for user 1 with PNRs

Notes:
- Target database comes from settings (DATABASE_URL_OVERRIDE or POSTGRES_*)
- Run against an empty database from the project root: python -m script.seed_data
"""

import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import func, select

from src.platform.database.orm_db_setting import Database, create_db_and_tables
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.pnr import generate_unique_pnr
from src.service.airline_ticketing.driven_adapter.model.company_model import CompanyModel
from src.service.airline_ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.airline_ticketing.driven_adapter.model.trip_model import TripModel

AIRLINE_NAME = 'Vietnam Airlines'
DEMO_USER_ID = 1
DAYS_AHEAD = 5
ROUTES = [('Hanoi', 'Ho Chi Minh City'), ('Ho Chi Minh City', 'Hanoi')]


def _build_trip(company_id: int, from_city: str, to_city: str, departure: datetime) -> Trip:
    return Trip(
        id=0,  # assigned on insert
        company_id=company_id,
        airline_name=AIRLINE_NAME,
        plane_name='A321',
        from_city=from_city,
        to_city=to_city,
        departure_time=departure,
        arrival_time=departure + timedelta(hours=2, minutes=10),
        economy_price=Decimal('100.00'),
        business_price=Decimal('250.00'),
        first_class_price=Decimal('500.00'),
        economy_seats=180,
        business_seats=16,
        first_class_seats=8,
        round_trip_discount_percent=Decimal('10') if from_city == 'Hanoi' else None,
    )


async def create_company(database: Database) -> int:
    print(f'🏢 Creating airline {AIRLINE_NAME}...')
    async with database.session() as session:
        company = CompanyModel(name=AIRLINE_NAME)
        session.add(company)
        await session.commit()
        print(f'   ✅ Created company: ID={company.id}')
        return company.id


async def create_trips(database: Database, company_id: int) -> list[Trip]:
    print(f'✈️  Creating trips for the next {DAYS_AHEAD} days...')
    first_departure = datetime.now(timezone.utc).replace(
        hour=6, minute=0, second=0, microsecond=0
    ) + timedelta(days=1)

    async with database.session() as session:
        uow = SqlAlchemyUnitOfWork(session)
        async with uow:
            trips = []
            for day in range(DAYS_AHEAD):
                for offset, (from_city, to_city) in enumerate(ROUTES):
                    departure = first_departure + timedelta(days=day, hours=offset * 6)
                    trips.append(
                        await uow.trip_repo.add(
                            _build_trip(company_id, from_city, to_city, departure)
                        )
                    )
            await uow.commit()

    print(f'   ✅ Created trips: {len(trips)}')
    return trips


async def create_tickets(database: Database, trips: list[Trip]) -> None:
    print(f'🎫 Creating demo bookings for user {DEMO_USER_ID}...')
    async with database.session() as session:
        uow = SqlAlchemyUnitOfWork(session)
        async with uow:
            for trip, seat_number in zip(trips[:3], ('12A', '14C', '3F')):
                pnr = await generate_unique_pnr(uow.ticket_repo.pnr_exists)
                ticket = await uow.ticket_repo.add(
                    Ticket(
                        trip_id=trip.id,  # type: ignore[arg-type]
                        user_id=DEMO_USER_ID,
                        seat_class=SeatClass.ECONOMY,
                        total_price=trip.economy_price,
                        booking_date=datetime.now(timezone.utc),
                        payment_status=PaymentStatus.SUCCESS,
                        seat_number=seat_number,
                        passenger_name='Nguyen Van A',
                        pnr=pnr,
                    )
                )
                await uow.trip_repo.decrement_seats(
                    trip_id=trip.id,  # type: ignore[arg-type]
                    seat_class=SeatClass.ECONOMY,
                )
                print(f'   ✅ Ticket ID={ticket.id} PNR={pnr} seat {seat_number} on trip {trip.id}')
            await uow.commit()


async def verify_data(database: Database) -> None:
    print('🔍 Verifying seeded data...')
    async with database.session() as session:
        for model in (CompanyModel, TripModel, TicketModel):
            count = (await session.execute(select(func.count()).select_from(model))).scalar()
            print(f'   {model.__tablename__.capitalize()} count: {count}')


async def main() -> None:
    database = Database()
    try:
        await create_db_and_tables(database.engine)
        company_id = await create_company(database)
        trips = await create_trips(database, company_id)
        await create_tickets(database, trips)
        await verify_data(database)
        print('🎉 Seed complete')
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
