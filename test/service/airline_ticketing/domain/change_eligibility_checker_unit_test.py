"""
Unit tests for the change eligibility checker

Test Focus:
1. Rule order: cancelled, checked in, missing trip, departed, too close
2. Threshold boundary (exactly the minimum is allowed)
3. Denials never carry a fee
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

import pytest

from src.service.airline_ticketing.domain.change_eligibility_checker import (
    CANCELLED_MESSAGE,
    CHECKED_IN_MESSAGE,
    DEPARTED_MESSAGE,
    TRIP_NOT_FOUND_MESSAGE,
    check_change_eligibility,
    too_close_to_departure_message,
)
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass


@pytest.mark.unit
class TestCheckChangeEligibility:
    def test_active_ticket_well_before_departure_is_allowed(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        # Given: departure in 48 hours on Vietnam Airlines, Economy
        # When
        eligibility = check_change_eligibility(ticket=build_ticket(), trip=build_trip(), now=now)

        # Then
        assert eligibility.allowed is True
        assert eligibility.reason is None
        assert eligibility.change_fee == Decimal('15')
        assert eligibility.hours_before_departure == pytest.approx(48)

    def test_fee_follows_carrier_and_class(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        eligibility = check_change_eligibility(
            ticket=build_ticket(seat_class=SeatClass.BUSINESS),
            trip=build_trip(airline_name='VietJet Air'),
            now=now,
        )

        assert eligibility.change_fee == Decimal('35')

    def test_cancelled_ticket_is_denied(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        eligibility = check_change_eligibility(
            ticket=build_ticket(is_cancelled=True), trip=build_trip(), now=now
        )

        assert eligibility.allowed is False
        assert eligibility.reason == CANCELLED_MESSAGE
        assert eligibility.change_fee == 0

    def test_cancelled_is_reported_before_departed(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        # Given: cancelled ticket on a flight that already left
        departed = build_trip(departure_time=now - timedelta(hours=1))

        eligibility = check_change_eligibility(
            ticket=build_ticket(is_cancelled=True), trip=departed, now=now
        )

        # Then: the permanent state wins
        assert eligibility.reason == CANCELLED_MESSAGE

    def test_checked_in_ticket_is_denied(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        eligibility = check_change_eligibility(
            ticket=build_ticket(is_checked_in=True), trip=build_trip(), now=now
        )

        assert eligibility.allowed is False
        assert eligibility.reason == CHECKED_IN_MESSAGE

    def test_missing_trip_is_denied(self, now: datetime, build_ticket: Callable[..., Ticket]):
        eligibility = check_change_eligibility(ticket=build_ticket(), trip=None, now=now)

        assert eligibility.allowed is False
        assert eligibility.reason == TRIP_NOT_FOUND_MESSAGE

    def test_departed_flight_is_denied(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        eligibility = check_change_eligibility(
            ticket=build_ticket(), trip=build_trip(departure_time=now), now=now
        )

        assert eligibility.allowed is False
        assert eligibility.reason == DEPARTED_MESSAGE
        assert eligibility.hours_before_departure == 0

    def test_too_close_to_departure_is_denied(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        trip = build_trip(departure_time=now + timedelta(hours=2, minutes=59))

        eligibility = check_change_eligibility(ticket=build_ticket(), trip=trip, now=now)

        assert eligibility.allowed is False
        assert eligibility.reason == too_close_to_departure_message(3)
        assert eligibility.change_fee == 0

    def test_exactly_at_threshold_is_allowed(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        trip = build_trip(departure_time=now + timedelta(hours=3))

        eligibility = check_change_eligibility(ticket=build_ticket(), trip=trip, now=now)

        assert eligibility.allowed is True

    def test_threshold_is_configurable(
        self, now: datetime, build_ticket: Callable[..., Ticket], build_trip: Callable[..., Trip]
    ):
        trip = build_trip(departure_time=now + timedelta(hours=10))

        eligibility = check_change_eligibility(
            ticket=build_ticket(), trip=trip, now=now, min_hours_before_departure=12
        )

        assert eligibility.allowed is False
        assert '12 hours' in (eligibility.reason or '')
