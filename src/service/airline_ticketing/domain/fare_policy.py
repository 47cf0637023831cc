"""
Fare policy

Prices come straight from the trip's per-class price table. Change fees come
from CHANGE_FEE_POLICY: the first carrier keyword found (case-insensitive) in
the airline name wins, in declaration order; anything else pays
DEFAULT_CHANGE_FEE. Amounts are USD.
"""

from decimal import ROUND_HALF_UP, Decimal

from src.platform.exception.exceptions import DomainError
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.value_object.round_trip_price_breakdown import (
    RoundTripPriceBreakdown,
)


DEFAULT_CHANGE_FEE = Decimal('15')

CHANGE_FEE_POLICY: dict[str, dict[SeatClass, Decimal]] = {
    'vietnam airlines': {
        SeatClass.ECONOMY: Decimal('15'),
        SeatClass.BUSINESS: Decimal('15'),
        SeatClass.FIRST_CLASS: Decimal('0'),
    },
    'vietjet': {
        SeatClass.ECONOMY: Decimal('15'),
        SeatClass.BUSINESS: Decimal('35'),
        SeatClass.FIRST_CLASS: Decimal('0'),
    },
    'bamboo': {
        SeatClass.ECONOMY: Decimal('10'),
        SeatClass.BUSINESS: Decimal('10'),
        SeatClass.FIRST_CLASS: Decimal('0'),
    },
    'jetstar': {
        SeatClass.ECONOMY: Decimal('15'),
        SeatClass.BUSINESS: Decimal('20'),
        SeatClass.FIRST_CLASS: Decimal('0'),
    },
}

MIN_ROUND_TRIP_DISCOUNT = Decimal('0')
MAX_ROUND_TRIP_DISCOUNT = Decimal('50')

_CENT = Decimal('0.01')


def to_money(amount: Decimal) -> Decimal:
    return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def price_for(trip: Trip, seat_class: SeatClass | str) -> Decimal:
    match SeatClass.parse(seat_class):
        case SeatClass.ECONOMY:
            return trip.economy_price
        case SeatClass.BUSINESS:
            return trip.business_price
        case SeatClass.FIRST_CLASS:
            return trip.first_class_price


def change_fee_for(airline_name: str | None, seat_class: SeatClass | str) -> Decimal:
    seat_class = SeatClass.parse(seat_class)
    name = (airline_name or '').lower()
    for carrier_keyword, fees in CHANGE_FEE_POLICY.items():
        if carrier_keyword in name:
            return fees[seat_class]
    return DEFAULT_CHANGE_FEE


def is_valid_discount_percent(discount_percent: Decimal) -> bool:
    return MIN_ROUND_TRIP_DISCOUNT <= discount_percent <= MAX_ROUND_TRIP_DISCOUNT


def validate_discount_percent(discount_percent: Decimal) -> Decimal:
    if not is_valid_discount_percent(discount_percent):
        raise DomainError(
            f'Discount must be between {MIN_ROUND_TRIP_DISCOUNT}% and '
            f'{MAX_ROUND_TRIP_DISCOUNT}%. Provided: {discount_percent}%'
        )
    return discount_percent


def round_trip_price(
    *,
    outbound_trip: Trip,
    return_trip: Trip,
    outbound_class: SeatClass | str,
    return_class: SeatClass | str | None = None,
    route_discount_percent: Decimal | None = None,
) -> RoundTripPriceBreakdown:
    """
    Price both legs and discount their combined subtotal.

    The outbound trip's own discount wins; when it is unset the route
    discount is used, and with neither there is no discount.
    """
    outbound_price = price_for(outbound_trip, outbound_class)
    return_price = price_for(return_trip, return_class or outbound_class)
    subtotal = outbound_price + return_price

    discount_percent = outbound_trip.round_trip_discount_percent
    if discount_percent is None:
        discount_percent = route_discount_percent or Decimal('0')
    validate_discount_percent(discount_percent)

    discount_amount = to_money(subtotal * discount_percent / Decimal('100'))
    total_price = subtotal - discount_amount

    return RoundTripPriceBreakdown(
        outbound_price=outbound_price,
        return_price=return_price,
        subtotal=subtotal,
        discount_percent=discount_percent,
        discount_amount=discount_amount,
        total_price=total_price,
        savings_amount=subtotal - total_price,
    )
