from decimal import Decimal
from typing import Optional

import attrs


@attrs.frozen
class ChangeEligibility:
    allowed: bool
    reason: Optional[str] = None
    change_fee: Decimal = Decimal('0')
    hours_before_departure: Optional[float] = None

    @classmethod
    def deny(cls, reason: str, *, hours_before_departure: float | None = None) -> 'ChangeEligibility':
        return cls(allowed=False, reason=reason, hours_before_departure=hours_before_departure)
