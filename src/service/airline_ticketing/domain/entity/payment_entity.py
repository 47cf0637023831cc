from datetime import datetime, timezone
from decimal import Decimal
import secrets
from typing import Optional

import attrs

from src.service.airline_ticketing.domain.enum.payment_method import PaymentMethod
from src.service.airline_ticketing.domain.enum.payment_status import PaymentStatus


def generate_transaction_code() -> str:
    return secrets.token_hex(8).upper()


@attrs.frozen
class Payment:
    ticket_id: int
    method: PaymentMethod
    transaction_code: str
    amount: Decimal
    payment_date: datetime
    status: PaymentStatus
    id: Optional[int] = None

    @classmethod
    def succeeded(
        cls,
        *,
        ticket_id: int,
        amount: Decimal,
        transaction_code: str | None = None,
        method: PaymentMethod = PaymentMethod.VNPAY,
        now: datetime | None = None,
    ) -> 'Payment':
        return cls(
            ticket_id=ticket_id,
            method=method,
            transaction_code=transaction_code or generate_transaction_code(),
            amount=amount,
            payment_date=now or datetime.now(timezone.utc),
            status=PaymentStatus.SUCCESS,
        )
