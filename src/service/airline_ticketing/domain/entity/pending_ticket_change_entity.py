from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import attrs
import uuid_utils

from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote


@attrs.frozen
class PendingTicketChange:
    """
    A ticket change waiting for the payment gateway callback.

    The token travels to the gateway as the transaction reference and comes
    back in the callback, so the change is resumed without any web session.
    """

    token: str
    ticket_id: int
    user_id: int
    new_trip_id: int
    target_seat_class: SeatClass
    change_fee: Decimal
    price_difference: Decimal
    total_due: Decimal
    refund_amount: Decimal
    created_at: datetime
    expires_at: datetime
    reason: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def open(
        cls,
        *,
        ticket_id: int,
        user_id: int,
        new_trip_id: int,
        quote: ChangeQuote,
        reason: str | None,
        ttl: timedelta,
        now: datetime | None = None,
    ) -> 'PendingTicketChange':
        created_at = now or datetime.now(timezone.utc)
        return cls(
            token=str(uuid_utils.uuid7()),
            ticket_id=ticket_id,
            user_id=user_id,
            new_trip_id=new_trip_id,
            target_seat_class=quote.target_seat_class,
            change_fee=quote.change_fee,
            price_difference=quote.price_difference,
            total_due=quote.total_due,
            refund_amount=quote.refund_amount,
            created_at=created_at,
            expires_at=created_at + ttl,
            reason=reason,
        )

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
