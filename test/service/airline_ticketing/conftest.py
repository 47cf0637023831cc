"""
In-memory unit of work for unit tests

Each unit of work works on a private copy of the store tables and writes the
rows it touched back on commit. Commit enforces the same rules as the real
schema: one active ticket per (trip, seat) and unique PNRs, raised as
ConflictError like SqlAlchemyUnitOfWork does.

Set `store.fail_on = {'payment_repo.add'}` to make a repository call blow up
halfway through a transaction.
"""

import asyncio
from datetime import datetime, timedelta
from decimal import Decimal
import itertools
from typing import Any, Callable

import attrs
import pytest

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass


_SEAT_COUNTER = {
    SeatClass.ECONOMY: 'economy_seats',
    SeatClass.BUSINESS: 'business_seats',
    SeatClass.FIRST_CLASS: 'first_class_seats',
}

TABLES = ('trips', 'tickets', 'histories', 'payments', 'pending')


class InMemoryStore:
    def __init__(self) -> None:
        self.tables: dict[str, dict[int, Any]] = {name: {} for name in TABLES}
        self.fail_on: set[str] = set()
        self.commits = 0
        self._ids = itertools.count(100)

    def next_id(self) -> int:
        return next(self._ids)

    def put(self, table: str, entity: Any) -> Any:
        if entity.id is None:
            entity = attrs.evolve(entity, id=self.next_id())
        self.tables[table][entity.id] = entity
        return entity

    @property
    def trips(self) -> dict[int, Trip]:
        return self.tables['trips']

    @property
    def tickets(self) -> dict[int, Ticket]:
        return self.tables['tickets']

    @property
    def histories(self) -> dict[int, Any]:
        return self.tables['histories']

    @property
    def payments(self) -> dict[int, Any]:
        return self.tables['payments']

    @property
    def pending(self) -> dict[int, Any]:
        return self.tables['pending']


class _FakeRepo:
    table = ''

    def __init__(self, uow: 'InMemoryUnitOfWork') -> None:
        self.uow = uow

    @property
    def rows(self) -> dict[int, Any]:
        return self.uow.tables[self.table]

    def _maybe_fail(self, operation: str) -> None:
        if f'{self.name}.{operation}' in self.uow.store.fail_on:
            raise RuntimeError(f'{self.name}.{operation} failed')

    @property
    def name(self) -> str:
        return type(self).__name__

    async def get_by_id(self, entity_id: int, *, for_update: bool = False) -> Any:
        await asyncio.sleep(0)
        return self.rows.get(entity_id)

    async def find(self, **criteria: Any) -> list[Any]:
        return [
            row
            for row in self.rows.values()
            if all(getattr(row, key) == value for key, value in criteria.items())
        ]

    async def add(self, entity: Any) -> Any:
        self._maybe_fail('add')
        if entity.id is None:
            entity = attrs.evolve(entity, id=self.uow.store.next_id())
        self.rows[entity.id] = entity
        self.uow.touch(self.table, entity.id)
        return entity

    async def update(self, entity: Any) -> Any:
        self._maybe_fail('update')
        await asyncio.sleep(0)
        self.rows[entity.id] = entity
        self.uow.touch(self.table, entity.id)
        return entity

    async def delete(self, entity_id: int) -> None:
        self.rows.pop(entity_id, None)
        self.uow.touch(self.table, entity_id)

    async def count(self, **criteria: Any) -> int:
        return len(await self.find(**criteria))

    async def exists(self, **criteria: Any) -> bool:
        return bool(await self.find(**criteria))


class FakeTripRepo(_FakeRepo):
    table = 'trips'

    @property
    def name(self) -> str:
        return 'trip_repo'

    async def find_route_discount(
        self, *, company_id: int, from_city: str, to_city: str
    ) -> Decimal | None:
        for trip in self.rows.values():
            if (
                trip.company_id == company_id
                and trip.from_city == from_city
                and trip.to_city == to_city
                and trip.round_trip_discount_percent is not None
            ):
                return trip.round_trip_discount_percent
        return None

    async def decrement_seats(self, *, trip_id: int, seat_class: SeatClass) -> bool:
        self._maybe_fail('decrement_seats')
        trip = self.rows.get(trip_id)
        column = _SEAT_COUNTER[SeatClass.parse(seat_class)]
        if not trip or getattr(trip, column) <= 0:
            return False
        self.rows[trip_id] = attrs.evolve(trip, **{column: getattr(trip, column) - 1})
        self.uow.touch(self.table, trip_id)
        return True

    async def increment_seats(self, *, trip_id: int, seat_class: SeatClass) -> None:
        self._maybe_fail('increment_seats')
        trip = self.rows.get(trip_id)
        if trip:
            column = _SEAT_COUNTER[SeatClass.parse(seat_class)]
            self.rows[trip_id] = attrs.evolve(trip, **{column: getattr(trip, column) + 1})
            self.uow.touch(self.table, trip_id)


class FakeTicketRepo(_FakeRepo):
    table = 'tickets'

    @property
    def name(self) -> str:
        return 'ticket_repo'

    async def get_by_pnr(self, *, pnr: str) -> Ticket | None:
        for ticket in self.rows.values():
            if ticket.pnr == pnr.strip().upper():
                return ticket
        return None

    async def pnr_exists(self, pnr: str) -> bool:
        return any(ticket.pnr == pnr for ticket in self.rows.values())

    async def is_seat_available(
        self, *, trip_id: int, seat_number: str, exclude_ticket_id: int | None = None
    ) -> bool:
        await asyncio.sleep(0)
        seat = seat_number.strip().upper()
        return not any(
            ticket.trip_id == trip_id
            and not ticket.is_cancelled
            and ticket.seat_number.upper() == seat
            and ticket.id != exclude_ticket_id
            for ticket in self.rows.values()
        )

    async def list_booked_seats(
        self, *, trip_id: int, seat_class: SeatClass | None = None
    ) -> list[str]:
        return [
            ticket.seat_number
            for ticket in self.rows.values()
            if ticket.trip_id == trip_id
            and not ticket.is_cancelled
            and ticket.seat_number
            and (seat_class is None or ticket.seat_class == seat_class)
        ]


class FakeTicketChangeHistoryRepo(_FakeRepo):
    table = 'histories'

    @property
    def name(self) -> str:
        return 'ticket_change_history_repo'


class FakePaymentRepo(_FakeRepo):
    table = 'payments'

    @property
    def name(self) -> str:
        return 'payment_repo'


class FakePendingTicketChangeRepo(_FakeRepo):
    table = 'pending'

    @property
    def name(self) -> str:
        return 'pending_ticket_change_repo'

    async def get_by_token(self, *, token: str) -> Any:
        for pending in self.rows.values():
            if pending.token == token:
                return pending
        return None

    async def delete_for_ticket(self, *, ticket_id: int) -> None:
        for pending_id in [p.id for p in self.rows.values() if p.ticket_id == ticket_id]:
            await self.delete(pending_id)

    async def delete_expired(self, *, now: datetime) -> int:
        expired = [p.id for p in self.rows.values() if p.expires_at <= now]
        for pending_id in expired:
            await self.delete(pending_id)
        return len(expired)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.tables: dict[str, dict[int, Any]] = {}
        self._dirty: set[tuple[str, int]] = set()

    async def __aenter__(self) -> 'InMemoryUnitOfWork':
        self.tables = {name: dict(rows) for name, rows in self.store.tables.items()}
        self._dirty = set()
        self.trip_repo = FakeTripRepo(self)
        self.ticket_repo = FakeTicketRepo(self)
        self.ticket_change_history_repo = FakeTicketChangeHistoryRepo(self)
        self.payment_repo = FakePaymentRepo(self)
        self.pending_ticket_change_repo = FakePendingTicketChangeRepo(self)
        await super().__aenter__()
        return self

    def touch(self, table: str, entity_id: int) -> None:
        self._dirty.add((table, entity_id))

    def _merged_tickets(self) -> dict[int, Ticket]:
        merged = dict(self.store.tickets)
        for table, entity_id in self._dirty:
            if table == 'tickets' and entity_id in self.tables['tickets']:
                merged[entity_id] = self.tables['tickets'][entity_id]
        return merged

    def _check_constraints(self) -> None:
        tickets = self._merged_tickets()
        seats: set[tuple[int, str]] = set()
        pnrs: set[str] = set()
        for ticket in tickets.values():
            if ticket.pnr:
                if ticket.pnr in pnrs:
                    raise ConflictError(f'Constraint violated: duplicate pnr {ticket.pnr}')
                pnrs.add(ticket.pnr)
            if ticket.is_cancelled or not ticket.seat_number:
                continue
            key = (ticket.trip_id, ticket.seat_number.upper())
            if key in seats:
                raise ConflictError(f'Constraint violated: seat {key} already held')
            seats.add(key)

    async def _commit(self) -> None:
        await asyncio.sleep(0)
        self._check_constraints()
        for table, entity_id in self._dirty:
            if entity_id in self.tables[table]:
                self.store.tables[table][entity_id] = self.tables[table][entity_id]
            else:
                self.store.tables[table].pop(entity_id, None)
        self._dirty = set()
        self.store.commits += 1

    async def rollback(self) -> None:
        self._dirty = set()
        self.tables = {name: dict(rows) for name, rows in self.store.tables.items()}


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def uow_factory(store: InMemoryStore) -> Callable[[], InMemoryUnitOfWork]:
    return lambda: InMemoryUnitOfWork(store)


@pytest.fixture
def uow(uow_factory: Callable[[], InMemoryUnitOfWork]) -> InMemoryUnitOfWork:
    return uow_factory()


@pytest.fixture
def build_trip(now: datetime) -> Callable[..., Trip]:
    def _build(**overrides: Any) -> Trip:
        values: dict[str, Any] = {
            'id': 1,
            'company_id': 1,
            'airline_name': 'Vietnam Airlines',
            'plane_name': 'A321',
            'from_city': 'Hanoi',
            'to_city': 'Ho Chi Minh City',
            'departure_time': now + timedelta(hours=48),
            'arrival_time': now + timedelta(hours=50),
            'economy_price': Decimal('100.00'),
            'business_price': Decimal('250.00'),
            'first_class_price': Decimal('500.00'),
            'economy_seats': 30,
            'business_seats': 8,
            'first_class_seats': 4,
        }
        values.update(overrides)
        return Trip(**values)

    return _build


@pytest.fixture
def build_ticket(now: datetime) -> Callable[..., Ticket]:
    def _build(**overrides: Any) -> Ticket:
        values: dict[str, Any] = {
            'trip_id': 1,
            'user_id': 7,
            'seat_class': SeatClass.ECONOMY,
            'total_price': Decimal('100.00'),
            'booking_date': now - timedelta(days=3),
            'payment_status': PaymentStatus.SUCCESS,
            'passenger_name': 'Nguyen Van A',
            'pnr': 'ABC234',
        }
        values.update(overrides)
        return Ticket(**values)

    return _build

