"""
Change amount calculation

No refund on downgrade: the customer always pays at least the change fee
and never gets money back for a cheaper replacement.
"""

from decimal import Decimal

from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.entity.trip_entity import Trip
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.fare_policy import price_for
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote


NO_REFUND = Decimal('0')


def target_seat_class(ticket: Ticket, new_seat_class: SeatClass | str | None) -> SeatClass:
    return SeatClass.parse(new_seat_class) if new_seat_class else ticket.seat_class


def price_difference(
    *,
    original_ticket: Ticket,
    original_trip: Trip,
    new_trip: Trip,
    new_seat_class: SeatClass | str | None = None,
) -> Decimal:
    """New fare minus the original fare, signed."""
    new_price = price_for(new_trip, target_seat_class(original_ticket, new_seat_class))
    original_price = price_for(original_trip, original_ticket.seat_class)
    return new_price - original_price


def total_change_amount(
    *, change_fee: Decimal, price_difference: Decimal
) -> tuple[Decimal, Decimal]:
    """Return (total_due, refund_amount); refund_amount is always 0."""
    if price_difference > 0:
        return change_fee + price_difference, NO_REFUND
    return change_fee, NO_REFUND


def quote_change(
    *,
    original_ticket: Ticket,
    original_trip: Trip,
    new_trip: Trip,
    change_fee: Decimal,
    new_seat_class: SeatClass | str | None = None,
) -> ChangeQuote:
    seat_class = target_seat_class(original_ticket, new_seat_class)
    original_price = price_for(original_trip, original_ticket.seat_class)
    new_price = price_for(new_trip, seat_class)
    difference = new_price - original_price
    total_due, refund_amount = total_change_amount(
        change_fee=change_fee, price_difference=difference
    )
    return ChangeQuote(
        target_seat_class=seat_class,
        original_price=original_price,
        new_price=new_price,
        change_fee=change_fee,
        price_difference=difference,
        total_due=total_due,
        refund_amount=refund_amount,
    )
