from abc import ABC, abstractmethod
from decimal import Decimal


class ICurrencyConverter(ABC):
    @abstractmethod
    def convert(self, *, amount: Decimal, from_currency: str, to_currency: str) -> Decimal:
        pass
