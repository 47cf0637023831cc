from datetime import datetime

from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.fare_policy import change_fee_for
from src.service.airline_ticketing.domain.value_object.change_eligibility import (
    ChangeEligibility,
)


MIN_HOURS_BEFORE_DEPARTURE = 3

CANCELLED_MESSAGE = 'Ticket has been cancelled and cannot be changed.'
CHECKED_IN_MESSAGE = (
    'Ticket is already checked in and cannot be changed. Please contact the airport counter.'
)
TRIP_NOT_FOUND_MESSAGE = 'Flight information not found.'
DEPARTED_MESSAGE = 'Flight has already departed and cannot be changed.'


def too_close_to_departure_message(min_hours: int) -> str:
    return f'Tickets must be changed at least {min_hours} hours before departure.'


def check_change_eligibility(
    *,
    ticket: Ticket,
    trip: Trip | None,
    now: datetime,
    min_hours_before_departure: int = MIN_HOURS_BEFORE_DEPARTURE,
) -> ChangeEligibility:
    """
    Decide whether a ticket may be exchanged right now.

    Permanent states (cancelled, checked in) are reported before anything
    time based. Every denial carries a fee of 0.
    """
    if ticket.is_cancelled:
        return ChangeEligibility.deny(CANCELLED_MESSAGE)

    if ticket.is_checked_in:
        return ChangeEligibility.deny(CHECKED_IN_MESSAGE)

    if trip is None:
        return ChangeEligibility.deny(TRIP_NOT_FOUND_MESSAGE)

    hours_before_departure = trip.hours_before_departure(now)

    if trip.has_departed(now):
        return ChangeEligibility.deny(
            DEPARTED_MESSAGE, hours_before_departure=hours_before_departure
        )

    if hours_before_departure < min_hours_before_departure:
        return ChangeEligibility.deny(
            too_close_to_departure_message(min_hours_before_departure),
            hours_before_departure=hours_before_departure,
        )

    return ChangeEligibility(
        allowed=True,
        change_fee=change_fee_for(trip.airline_name, ticket.seat_class),
        hours_before_departure=hours_before_departure,
    )
