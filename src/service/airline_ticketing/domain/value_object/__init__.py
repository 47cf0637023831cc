from src.service.airline_ticketing.domain.value_object.change_eligibility import ChangeEligibility
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote
from src.service.airline_ticketing.domain.value_object.round_trip_price_breakdown import (
    RoundTripPriceBreakdown,
)
from src.service.airline_ticketing.domain.value_object.seat_map import SeatInfo, SeatMap

__all__ = [
    'ChangeEligibility',
    'ChangeQuote',
    'RoundTripPriceBreakdown',
    'SeatInfo',
    'SeatMap',
]
