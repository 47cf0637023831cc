from src.service.airline_ticketing.app.interface.i_repository import IRepository
from src.service.airline_ticketing.domain.entity.ticket_change_history_entity import (
    TicketChangeHistory,
)


class ITicketChangeHistoryRepo(IRepository[TicketChangeHistory]):
    """Append-only: update and delete are refused"""
