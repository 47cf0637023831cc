from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.enum.ticket_type import TicketType


DEFAULT_CHANGE_CANCELLATION_REASON = 'Ticket changed by user.'


@attrs.define
class Ticket:
    trip_id: int
    user_id: int
    seat_class: SeatClass
    total_price: Decimal
    booking_date: datetime
    payment_status: PaymentStatus = PaymentStatus.PENDING
    seat_number: str = ''  # '{row}{letter}', empty until a seat is assigned
    passenger_name: Optional[str] = None
    pnr: Optional[str] = None
    is_checked_in: bool = False
    check_in_time: Optional[datetime] = None
    is_cancelled: bool = False
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    ticket_type: TicketType = TicketType.ONE_WAY
    outbound_ticket_id: Optional[int] = None
    return_ticket_id: Optional[int] = None
    booking_group_id: Optional[str] = None
    meal_option: Optional[str] = None
    baggage_option: Optional[str] = None
    add_on_price: Decimal = Decimal('0')
    id: Optional[int] = None  # None until persisted

    @property
    def has_seat(self) -> bool:
        return bool(self.seat_number)

    def holds_seat(self, seat_number: str) -> bool:
        return self.seat_number.upper() == seat_number.strip().upper()

    @classmethod
    @Logger.io
    def create_replacement(
        cls,
        *,
        original: 'Ticket',
        new_trip_id: int,
        seat_class: SeatClass,
        total_price: Decimal,
        pnr: str,
        now: datetime | None = None,
    ) -> 'Ticket':
        """
        Build the ticket that replaces `original` after a change.

        Passenger, add-ons and round-trip linkage are carried over; the seat
        is left empty because seats are per trip.
        """
        return cls(
            trip_id=new_trip_id,
            user_id=original.user_id,
            seat_class=seat_class,
            total_price=total_price,
            booking_date=now or datetime.now(timezone.utc),
            payment_status=PaymentStatus.SUCCESS,
            seat_number='',
            passenger_name=original.passenger_name,
            pnr=pnr,
            ticket_type=original.ticket_type,
            outbound_ticket_id=original.outbound_ticket_id,
            return_ticket_id=original.return_ticket_id,
            booking_group_id=original.booking_group_id,
            meal_option=original.meal_option,
            baggage_option=original.baggage_option,
            add_on_price=original.add_on_price,
        )

    def with_seat(self, seat_number: str) -> 'Ticket':
        return attrs.evolve(self, seat_number=seat_number.strip().upper())

    @Logger.io
    def cancel(self, *, reason: str | None = None, now: datetime | None = None) -> 'Ticket':
        if self.is_cancelled:
            raise DomainError('Ticket is already cancelled')
        return attrs.evolve(
            self,
            is_cancelled=True,
            cancelled_at=now or datetime.now(timezone.utc),
            cancellation_reason=reason or DEFAULT_CHANGE_CANCELLATION_REASON,
        )

    @Logger.io
    def check_in(self, *, now: datetime | None = None) -> 'Ticket':
        return attrs.evolve(
            self, is_checked_in=True, check_in_time=now or datetime.now(timezone.utc)
        )
