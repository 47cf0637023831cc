from decimal import Decimal
from typing import Mapping

from src.platform.exception.exceptions import DomainError
from src.service.airline_ticketing.app.interface.i_currency_converter import ICurrencyConverter


class FixedRateCurrencyConverterImpl(ICurrencyConverter):
    """Converts through configured rates, each expressed per 1 unit of the base currency"""

    def __init__(self, *, rates: Mapping[str, Decimal]) -> None:
        self.rates = {code.upper(): Decimal(rate) for code, rate in rates.items()}

    def _rate(self, currency: str) -> Decimal:
        rate = self.rates.get(currency.upper())
        if rate is None or rate <= 0:
            raise DomainError(f'Unsupported currency: {currency}')
        return rate

    def convert(self, *, amount: Decimal, from_currency: str, to_currency: str) -> Decimal:
        if from_currency.upper() == to_currency.upper():
            return amount
        return amount / self._rate(from_currency) * self._rate(to_currency)
