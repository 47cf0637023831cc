import attrs

from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.enum.seat_position import SeatPosition


@attrs.frozen
class SeatInfo:
    seat_number: str
    row: int
    column: int  # 0-based
    column_letter: str
    is_available: bool
    position: SeatPosition


@attrs.frozen
class SeatMap:
    trip_id: int
    seat_class: SeatClass
    seats: tuple[SeatInfo, ...]
    total_rows: int
    seats_per_row: int

    @property
    def total_seats(self) -> int:
        return len(self.seats)

    @property
    def available_seats(self) -> int:
        return sum(1 for seat in self.seats if seat.is_available)

    @property
    def booked_seats(self) -> int:
        return self.total_seats - self.available_seats

