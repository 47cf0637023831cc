from decimal import Decimal
from typing import Optional

import attrs


@attrs.define(frozen=True)
class PaymentCallbackResult:
    """Verified gateway callback. Only built after the signature checked out."""

    success: bool
    transaction_ref: str
    response_code: str
    gateway_transaction_no: Optional[str] = None
    amount: Optional[Decimal] = None  # gateway currency
