"""Application layer interfaces (Ports)"""

from src.service.airline_ticketing.app.interface.i_currency_converter import ICurrencyConverter
from src.service.airline_ticketing.app.interface.i_payment_gateway import IPaymentGateway
from src.service.airline_ticketing.app.interface.i_payment_repo import IPaymentRepo
from src.service.airline_ticketing.app.interface.i_pending_ticket_change_repo import (
    IPendingTicketChangeRepo,
)
from src.service.airline_ticketing.app.interface.i_repository import IRepository
from src.service.airline_ticketing.app.interface.i_ticket_change_history_repo import (
    ITicketChangeHistoryRepo,
)
from src.service.airline_ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.airline_ticketing.app.interface.i_trip_repo import ITripRepo

__all__ = [
    'ICurrencyConverter',
    'IPaymentGateway',
    'IPaymentRepo',
    'IPendingTicketChangeRepo',
    'IRepository',
    'ITicketChangeHistoryRepo',
    'ITicketRepo',
    'ITripRepo',
]
