"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.airline_ticketing.driven_adapter.model.company_model import CompanyModel
from src.service.airline_ticketing.driven_adapter.model.payment_model import PaymentModel
from src.service.airline_ticketing.driven_adapter.model.pending_ticket_change_model import (
    PendingTicketChangeModel,
)
from src.service.airline_ticketing.driven_adapter.model.ticket_change_history_model import (
    TicketChangeHistoryModel,
)
from src.service.airline_ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.airline_ticketing.driven_adapter.model.trip_model import TripModel

__all__ = [
    'CompanyModel',
    'PaymentModel',
    'PendingTicketChangeModel',
    'TicketChangeHistoryModel',
    'TicketModel',
    'TripModel',
]
