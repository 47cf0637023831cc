from enum import StrEnum


class TicketType(StrEnum):
    ONE_WAY = 'one_way'
    ROUND_TRIP = 'round_trip'
