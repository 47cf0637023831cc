from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.service.airline_ticketing.domain.enum.seat_class import SeatClass


@attrs.define
class Trip:
    id: int
    company_id: int
    airline_name: str
    plane_name: str
    from_city: str
    to_city: str
    departure_time: datetime
    arrival_time: datetime
    economy_price: Decimal
    business_price: Decimal
    first_class_price: Decimal
    # Remaining sellable seats per class, mutated on booking and ticket change
    economy_seats: int = 0
    business_seats: int = 0
    first_class_seats: int = 0
    # None = not set on this trip, fall back to the route discount
    round_trip_discount_percent: Optional[Decimal] = None

    def remaining_seats(self, seat_class: SeatClass | str) -> int:
        match SeatClass.parse(seat_class):
            case SeatClass.ECONOMY:
                return self.economy_seats
            case SeatClass.BUSINESS:
                return self.business_seats
            case SeatClass.FIRST_CLASS:
                return self.first_class_seats

    def has_departed(self, now: datetime) -> bool:
        return self.departure_time <= now

    def hours_before_departure(self, now: datetime) -> float:
        return (self.departure_time - now).total_seconds() / 3600
