"""
Unit tests for seat map generation

Test Focus:
1. Layout per class (6 per row for Economy, 4 for Business/FirstClass)
2. Seat positions (window, aisle, middle)
3. Availability derived from the booked seat set
4. Seat number parsing and layout bounds
"""

import pytest

from src.platform.exception.exceptions import InvalidSeatClassError, InvalidSeatError
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.enum.seat_position import SeatPosition
from src.service.airline_ticketing.domain.seat_map_generator import (
    determine_seat_position,
    generate_seat_map,
    parse_seat_number,
    seat_number_fits_layout,
    seats_per_row_for,
)


@pytest.mark.unit
class TestGenerateSeatMap:
    def test_economy_map_has_six_seats_per_row(self):
        # Given: 30 economy seats and nothing booked
        # When
        seat_map = generate_seat_map(
            trip_id=1, seat_class=SeatClass.ECONOMY, total_seats=30, booked_seat_numbers=[]
        )

        # Then
        assert seat_map.seats_per_row == 6
        assert seat_map.total_rows == 5
        assert seat_map.total_seats == 30
        first_seats = [seat.seat_number for seat in seat_map.seats[:7]]
        assert first_seats == ['1A', '1B', '1C', '1D', '1E', '1F', '2A']
        assert seat_map.seats[-1].seat_number == '5F'

    def test_business_map_has_four_seats_per_row(self):
        seat_map = generate_seat_map(
            trip_id=1, seat_class='Business', total_seats=8, booked_seat_numbers=[]
        )

        assert seat_map.seats_per_row == 4
        assert seat_map.total_rows == 2
        second_row = [seat.seat_number for seat in seat_map.seats if seat.row == 2]
        assert second_row == ['2A', '2B', '2C', '2D']

    def test_partial_last_row(self):
        # Given: 7 seats do not fill the second economy row
        seat_map = generate_seat_map(
            trip_id=1, seat_class=SeatClass.ECONOMY, total_seats=7, booked_seat_numbers=[]
        )

        # Then: the row count rounds up and only 2A exists in row 2
        assert seat_map.total_rows == 2
        assert [seat.seat_number for seat in seat_map.seats if seat.row == 2] == ['2A']

    def test_booked_seats_are_unavailable_case_insensitive(self):
        # Given: seats stored in mixed case
        booked = ['1a', ' 2C ', '']

        # When
        seat_map = generate_seat_map(
            trip_id=9, seat_class=SeatClass.ECONOMY, total_seats=12, booked_seat_numbers=booked
        )

        # Then
        unavailable = {seat.seat_number for seat in seat_map.seats if not seat.is_available}
        assert unavailable == {'1A', '2C'}
        assert seat_map.available_seats == 10
        assert seat_map.booked_seats == 2
        assert seat_map.trip_id == 9

    def test_booked_seat_outside_layout_is_ignored(self):
        seat_map = generate_seat_map(
            trip_id=1, seat_class=SeatClass.FIRST_CLASS, total_seats=4, booked_seat_numbers=['9Z']
        )

        assert seat_map.available_seats == 4

    def test_zero_seats_gives_empty_map(self):
        seat_map = generate_seat_map(
            trip_id=1, seat_class=SeatClass.ECONOMY, total_seats=0, booked_seat_numbers=[]
        )

        assert seat_map.seats == ()
        assert seat_map.total_rows == 0

    def test_negative_total_is_rejected(self):
        with pytest.raises(InvalidSeatError):
            generate_seat_map(
                trip_id=1, seat_class=SeatClass.ECONOMY, total_seats=-1, booked_seat_numbers=[]
            )

    def test_unknown_seat_class_is_rejected(self):
        with pytest.raises(InvalidSeatClassError):
            generate_seat_map(
                trip_id=1, seat_class='Premium', total_seats=6, booked_seat_numbers=[]
            )


@pytest.mark.unit
class TestSeatPosition:
    @pytest.mark.parametrize(
        'column,expected',
        [
            (0, SeatPosition.WINDOW),
            (1, SeatPosition.MIDDLE),
            (2, SeatPosition.AISLE),
            (3, SeatPosition.AISLE),
            (4, SeatPosition.MIDDLE),
            (5, SeatPosition.WINDOW),
        ],
    )
    def test_economy_positions(self, column: int, expected: SeatPosition):
        assert determine_seat_position(column, 6) == expected

    @pytest.mark.parametrize(
        'column,expected',
        [
            (0, SeatPosition.WINDOW),
            (1, SeatPosition.AISLE),
            (2, SeatPosition.AISLE),
            (3, SeatPosition.WINDOW),
        ],
    )
    def test_business_positions(self, column: int, expected: SeatPosition):
        assert determine_seat_position(column, 4) == expected

    def test_generated_map_carries_positions(self):
        seat_map = generate_seat_map(
            trip_id=1, seat_class=SeatClass.ECONOMY, total_seats=6, booked_seat_numbers=[]
        )

        assert [seat.position for seat in seat_map.seats] == [
            SeatPosition.WINDOW,
            SeatPosition.MIDDLE,
            SeatPosition.AISLE,
            SeatPosition.AISLE,
            SeatPosition.MIDDLE,
            SeatPosition.WINDOW,
        ]


@pytest.mark.unit
class TestSeatNumberParsing:
    @pytest.mark.parametrize(
        'seat_number,expected',
        [('1A', (1, 0)), ('12c', (12, 2)), (' 3F ', (3, 5))],
    )
    def test_parse_valid(self, seat_number: str, expected: tuple[int, int]):
        assert parse_seat_number(seat_number) == expected

    @pytest.mark.parametrize('seat_number', ['', 'A1', '0A', '01A', '1', '1AB', '-1A'])
    def test_parse_invalid(self, seat_number: str):
        assert parse_seat_number(seat_number) is None

    @pytest.mark.parametrize(
        'seat_number,fits',
        [('5F', True), ('6A', True), ('99A', True), ('1G', False), ('abc', False)],
    )
    def test_fits_economy_row_width(self, seat_number: str, fits: bool):
        assert seat_number_fits_layout(seat_number, 6) is fits

    def test_business_rejects_fifth_column(self):
        assert seat_number_fits_layout('1E', seats_per_row_for(SeatClass.BUSINESS)) is False
