from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs

from src.service.airline_ticketing.domain.enum.change_status import ChangeStatus


@attrs.frozen
class TicketChangeHistory:
    """Append-only audit row linking an original ticket to its replacement."""

    original_ticket_id: int
    new_ticket_id: int
    change_date: datetime
    change_fee: Decimal
    price_difference: Decimal  # new price - old price, signed
    total_amount_paid: Decimal
    change_reason: Optional[str] = None
    status: ChangeStatus = ChangeStatus.COMPLETED
    id: Optional[int] = None

    @classmethod
    def record(
        cls,
        *,
        original_ticket_id: int,
        new_ticket_id: int,
        change_fee: Decimal,
        price_difference: Decimal,
        change_reason: str | None,
        now: datetime | None = None,
    ) -> 'TicketChangeHistory':
        return cls(
            original_ticket_id=original_ticket_id,
            new_ticket_id=new_ticket_id,
            change_date=now or datetime.now(timezone.utc),
            change_fee=change_fee,
            price_difference=price_difference,
            total_amount_paid=change_fee + max(price_difference, Decimal('0')),
            change_reason=change_reason,
        )
