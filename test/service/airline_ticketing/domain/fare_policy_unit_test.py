"""
Unit tests for the fare policy

Test Focus:
1. Per-class price lookup
2. Change fee table by carrier keyword, with the default fee fallback
3. Round-trip discount resolution (trip, then route, then none) and bounds
"""

from decimal import Decimal
from typing import Callable

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.fare_policy import (
    DEFAULT_CHANGE_FEE,
    change_fee_for,
    is_valid_discount_percent,
    price_for,
    round_trip_price,
    to_money,
)


@pytest.mark.unit
class TestPriceFor:
    def test_price_per_class(self, build_trip: Callable[..., Trip]):
        trip = build_trip()

        assert price_for(trip, SeatClass.ECONOMY) == Decimal('100.00')
        assert price_for(trip, 'business') == Decimal('250.00')
        assert price_for(trip, 'first_class') == Decimal('500.00')


@pytest.mark.unit
class TestChangeFee:
    @pytest.mark.parametrize(
        'airline_name,seat_class,expected',
        [
            ('Vietnam Airlines', SeatClass.ECONOMY, Decimal('15')),
            ('Vietnam Airlines', SeatClass.FIRST_CLASS, Decimal('0')),
            ('VietJet Air', SeatClass.BUSINESS, Decimal('35')),
            ('Bamboo Airways', SeatClass.ECONOMY, Decimal('10')),
            ('JETSTAR PACIFIC', SeatClass.BUSINESS, Decimal('20')),
        ],
    )
    def test_fee_table(self, airline_name: str, seat_class: SeatClass, expected: Decimal):
        assert change_fee_for(airline_name, seat_class) == expected

    @pytest.mark.parametrize('airline_name', ['Pacific Airlines', '', None])
    def test_unknown_carrier_pays_default_fee(self, airline_name: str | None):
        assert change_fee_for(airline_name, SeatClass.FIRST_CLASS) == DEFAULT_CHANGE_FEE


@pytest.mark.unit
class TestRoundTripPrice:
    def test_trip_discount_applies_to_subtotal(self, build_trip: Callable[..., Trip]):
        # Given: outbound 100 with its own 10% discount, return 120
        outbound = build_trip(round_trip_discount_percent=Decimal('10'))
        inbound = build_trip(id=2, economy_price=Decimal('120.00'))

        # When
        breakdown = round_trip_price(
            outbound_trip=outbound, return_trip=inbound, outbound_class=SeatClass.ECONOMY
        )

        # Then
        assert breakdown.subtotal == Decimal('220.00')
        assert breakdown.discount_percent == Decimal('10')
        assert breakdown.discount_amount == Decimal('22.00')
        assert breakdown.total_price == Decimal('198.00')
        assert breakdown.savings_amount == Decimal('22.00')

    def test_route_discount_used_when_trip_has_none(self, build_trip: Callable[..., Trip]):
        outbound = build_trip()
        inbound = build_trip(id=2, economy_price=Decimal('120.00'))

        breakdown = round_trip_price(
            outbound_trip=outbound,
            return_trip=inbound,
            outbound_class=SeatClass.ECONOMY,
            route_discount_percent=Decimal('15'),
        )

        assert breakdown.discount_amount == Decimal('33.00')
        assert breakdown.total_price == Decimal('187.00')

    def test_trip_discount_of_zero_beats_route_discount(self, build_trip: Callable[..., Trip]):
        outbound = build_trip(round_trip_discount_percent=Decimal('0'))
        inbound = build_trip(id=2)

        breakdown = round_trip_price(
            outbound_trip=outbound,
            return_trip=inbound,
            outbound_class=SeatClass.ECONOMY,
            route_discount_percent=Decimal('20'),
        )

        assert breakdown.discount_amount == Decimal('0')
        assert breakdown.total_price == breakdown.subtotal

    def test_no_discount_anywhere(self, build_trip: Callable[..., Trip]):
        breakdown = round_trip_price(
            outbound_trip=build_trip(),
            return_trip=build_trip(id=2),
            outbound_class=SeatClass.ECONOMY,
        )

        assert breakdown.total_price == Decimal('200.00')
        assert breakdown.savings_amount == Decimal('0')

    def test_return_class_can_differ(self, build_trip: Callable[..., Trip]):
        breakdown = round_trip_price(
            outbound_trip=build_trip(),
            return_trip=build_trip(id=2),
            outbound_class=SeatClass.BUSINESS,
            return_class=SeatClass.ECONOMY,
        )

        assert breakdown.outbound_price == Decimal('250.00')
        assert breakdown.return_price == Decimal('100.00')

    def test_discount_is_rounded_to_cents(self, build_trip: Callable[..., Trip]):
        outbound = build_trip(
            economy_price=Decimal('99.99'), round_trip_discount_percent=Decimal('12.5')
        )

        breakdown = round_trip_price(
            outbound_trip=outbound, return_trip=build_trip(id=2), outbound_class='Economy'
        )

        # 199.99 * 12.5% = 24.99875
        assert breakdown.discount_amount == Decimal('25.00')
        assert breakdown.total_price == Decimal('174.99')

    def test_out_of_range_discount_is_rejected(self, build_trip: Callable[..., Trip]):
        outbound = build_trip(round_trip_discount_percent=Decimal('60'))

        with pytest.raises(DomainError, match='between 0% and 50%'):
            round_trip_price(
                outbound_trip=outbound, return_trip=build_trip(id=2), outbound_class='Economy'
            )

    @pytest.mark.parametrize(
        'percent,valid',
        [('0', True), ('50', True), ('-0.01', False), ('50.01', False)],
    )
    def test_discount_bounds(self, percent: str, valid: bool):
        assert is_valid_discount_percent(Decimal(percent)) is valid

    def test_to_money_rounds_half_up(self):
        assert to_money(Decimal('1.005')) == Decimal('1.01')
