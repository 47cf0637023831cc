"""
Seat map generation

Pure functions: a seat map is rebuilt from the trip's seat counter and the
live set of booked seat numbers on every read, never cached.

Layouts:
    Economy     6 per row, 3-3  A B C | D E F
    Business    4 per row, 2-2  A B | C D
    FirstClass  4 per row, 2-2  A B | C D
"""

import math
import re
import string
from typing import Iterable

from src.platform.exception.exceptions import InvalidSeatError
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.enum.seat_position import SeatPosition
from src.service.airline_ticketing.domain.value_object.seat_map import SeatInfo, SeatMap


SEATS_PER_ROW: dict[SeatClass, int] = {
    SeatClass.ECONOMY: 6,
    SeatClass.BUSINESS: 4,
    SeatClass.FIRST_CLASS: 4,
}

_SEAT_NUMBER_PATTERN = re.compile(r'^([1-9][0-9]*)([A-Z])$')


def seats_per_row_for(seat_class: SeatClass | str) -> int:
    return SEATS_PER_ROW[SeatClass.parse(seat_class)]


def column_letter(column: int) -> str:
    return string.ascii_uppercase[column]


def determine_seat_position(column: int, seats_per_row: int) -> SeatPosition:
    if column == 0 or column == seats_per_row - 1:
        return SeatPosition.WINDOW

    if seats_per_row == 6:
        return SeatPosition.AISLE if column in (2, 3) else SeatPosition.MIDDLE
    if seats_per_row == 4:
        return SeatPosition.AISLE

    # Other widths have no defined aisle; inner seats default to Middle
    return SeatPosition.MIDDLE


def normalize_seat_number(seat_number: str) -> str:
    return seat_number.strip().upper()


def parse_seat_number(seat_number: str) -> tuple[int, int] | None:
    """'12C' -> (12, 2); None when the text is not '{row}{letter}'."""
    match = _SEAT_NUMBER_PATTERN.match(normalize_seat_number(seat_number))
    if not match:
        return None
    return int(match.group(1)), string.ascii_uppercase.index(match.group(2))


def seat_number_fits_layout(seat_number: str, seats_per_row: int) -> bool:
    """'{row}{letter}' with the letter inside the class row width; any row is accepted."""
    parsed = parse_seat_number(seat_number)
    return parsed is not None and parsed[1] < seats_per_row


def generate_seat_map(
    *,
    trip_id: int,
    seat_class: SeatClass | str,
    total_seats: int,
    booked_seat_numbers: Iterable[str],
) -> SeatMap:
    seat_class = SeatClass.parse(seat_class)
    if total_seats < 0:
        raise InvalidSeatError('total_seats must not be negative')

    per_row = SEATS_PER_ROW[seat_class]
    booked = {normalize_seat_number(number) for number in booked_seat_numbers if number}
    total_rows = math.ceil(total_seats / per_row)

    seats: list[SeatInfo] = []
    for index in range(total_seats):
        row, column = divmod(index, per_row)
        letter = column_letter(column)
        seat_number = f'{row + 1}{letter}'
        seats.append(
            SeatInfo(
                seat_number=seat_number,
                row=row + 1,
                column=column,
                column_letter=letter,
                is_available=seat_number not in booked,
                position=determine_seat_position(column, per_row),
            )
        )

    return SeatMap(
        trip_id=trip_id,
        seat_class=seat_class,
        seats=tuple(seats),
        total_rows=total_rows,
        seats_per_row=per_row,
    )

