from decimal import Decimal

import attrs

from src.service.airline_ticketing.domain.enum.seat_class import SeatClass


@attrs.frozen
class ChangeQuote:
    target_seat_class: SeatClass
    original_price: Decimal
    new_price: Decimal
    change_fee: Decimal
    price_difference: Decimal
    total_due: Decimal
    refund_amount: Decimal = Decimal('0')

    @property
    def requires_payment(self) -> bool:
        return self.total_due > 0
