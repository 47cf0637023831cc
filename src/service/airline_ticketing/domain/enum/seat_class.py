from enum import StrEnum

from src.platform.exception.exceptions import InvalidSeatClassError


class SeatClass(StrEnum):
    ECONOMY = 'Economy'
    BUSINESS = 'Business'
    FIRST_CLASS = 'FirstClass'

    @classmethod
    def parse(cls, value: 'str | SeatClass') -> 'SeatClass':
        """Accept 'Economy', 'economy', 'FirstClass', 'first_class', ..."""
        if isinstance(value, SeatClass):
            return value
        normalized = str(value).replace('_', '').replace(' ', '').lower()
        for seat_class in cls:
            if seat_class.value.lower() == normalized:
                return seat_class
        raise InvalidSeatClassError(f'Invalid seat class: {value}')
