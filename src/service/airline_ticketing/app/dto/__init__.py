"""Application layer DTOs"""

from src.service.airline_ticketing.app.dto.payment_callback_result import PaymentCallbackResult
from src.service.airline_ticketing.app.dto.ticket_change_result import (
    TicketChangeResult,
    TicketChangeStatus,
)

__all__ = [
    'PaymentCallbackResult',
    'TicketChangeResult',
    'TicketChangeStatus',
]
