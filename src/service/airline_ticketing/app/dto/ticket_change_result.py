from enum import StrEnum
from typing import Optional

import attrs

from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote


class TicketChangeStatus(StrEnum):
    COMPLETED = 'completed'
    PAYMENT_REQUIRED = 'payment_required'


@attrs.define(frozen=True)
class TicketChangeResult:
    status: TicketChangeStatus
    quote: ChangeQuote
    new_ticket: Optional[Ticket] = None
    payment_url: Optional[str] = None
    pending_token: Optional[str] = None
