from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Callable
from unittest.mock import Mock

import pytest

from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.driven_adapter.currency.fixed_rate_currency_converter_impl import (
    FixedRateCurrencyConverterImpl,
)


PAYMENT_URL = 'https://sandbox.vnpayment.vn/paymentv2/vpcpay.html?vnp_TxnRef=x'


@pytest.fixture
def change_scenario(
    store: Any,
    now: datetime,
    build_trip: Callable[..., Trip],
    build_ticket: Callable[..., Ticket],
) -> Any:
    """
    trip 1: original flight, Economy 100, departs in 48h
    trip 2: Economy 120, 5 seats left
    trip 3: Economy 80, FirstClass 450
    trip 4: Economy sold out
    ticket 10: user 7, Economy on trip 1, seat 2A
    """
    store.put('trips', build_trip(id=1))
    store.put('trips', build_trip(id=2, economy_price=Decimal('120.00'), economy_seats=5))
    store.put(
        'trips',
        build_trip(
            id=3,
            economy_price=Decimal('80.00'),
            first_class_price=Decimal('450.00'),
            departure_time=now + timedelta(hours=72),
        ),
    )
    store.put('trips', build_trip(id=4, economy_seats=0))
    store.put('tickets', build_ticket(id=10, user_id=7, pnr='AAA222', seat_number='2A'))
    return store


@pytest.fixture
def payment_gateway() -> Mock:
    gateway = Mock()
    gateway.create_payment_url.return_value = PAYMENT_URL
    return gateway


@pytest.fixture
def currency_converter() -> FixedRateCurrencyConverterImpl:
    return FixedRateCurrencyConverterImpl(rates={'USD': Decimal('1'), 'VND': Decimal('25000')})
