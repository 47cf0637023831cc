from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping

from src.service.airline_ticketing.app.dto.payment_callback_result import PaymentCallbackResult


class IPaymentGateway(ABC):
    """Redirect-style payment gateway: build a pay URL, verify the callback"""

    @abstractmethod
    def create_payment_url(
        self,
        *,
        amount: Decimal,
        description: str,
        bank_code: str | None,
        transaction_ref: str,
        client_ip: str | None = None,
    ) -> str:
        """amount is already in the gateway currency; client_ip is the paying browser"""
        pass

    @abstractmethod
    def parse_callback(self, params: Mapping[str, str]) -> PaymentCallbackResult:
        """Raises PaymentVerificationError when the signature does not match"""
        pass
