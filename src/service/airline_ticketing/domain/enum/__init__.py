"""Airline Ticketing Domain Enums"""

from src.service.airline_ticketing.domain.enum.change_status import ChangeStatus
from src.service.airline_ticketing.domain.enum.payment_method import PaymentMethod
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.enum.seat_position import SeatPosition
from src.service.airline_ticketing.domain.enum.ticket_type import TicketType

__all__ = [
    'ChangeStatus',
    'PaymentMethod',
    'PaymentStatus',
    'SeatClass',
    'SeatPosition',
    'TicketType',
]
