from enum import StrEnum


class SeatPosition(StrEnum):
    WINDOW = 'Window'
    AISLE = 'Aisle'
    MIDDLE = 'Middle'
