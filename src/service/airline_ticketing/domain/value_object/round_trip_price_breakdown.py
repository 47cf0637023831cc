from decimal import Decimal

import attrs


@attrs.frozen
class RoundTripPriceBreakdown:
    outbound_price: Decimal
    return_price: Decimal
    subtotal: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    total_price: Decimal
    savings_amount: Decimal
