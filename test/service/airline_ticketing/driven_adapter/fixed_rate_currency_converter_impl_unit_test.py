from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.airline_ticketing.driven_adapter.currency.fixed_rate_currency_converter_impl import (
    FixedRateCurrencyConverterImpl,
)


@pytest.mark.unit
class TestFixedRateCurrencyConverter:
    @pytest.fixture
    def converter(self) -> FixedRateCurrencyConverterImpl:
        return FixedRateCurrencyConverterImpl(
            rates={'USD': Decimal('1'), 'VND': Decimal('25000'), 'EUR': Decimal('0.9')}
        )

    def test_usd_to_vnd(self, converter: FixedRateCurrencyConverterImpl):
        amount = converter.convert(amount=Decimal('35'), from_currency='USD', to_currency='VND')

        assert amount == Decimal('875000')

    def test_cross_rate(self, converter: FixedRateCurrencyConverterImpl):
        amount = converter.convert(amount=Decimal('9'), from_currency='eur', to_currency='usd')

        assert amount == Decimal('10')

    def test_same_currency_is_unchanged(self, converter: FixedRateCurrencyConverterImpl):
        assert converter.convert(
            amount=Decimal('12.34'), from_currency='USD', to_currency='usd'
        ) == Decimal('12.34')

    def test_unknown_currency(self, converter: FixedRateCurrencyConverterImpl):
        with pytest.raises(DomainError, match='Unsupported currency'):
            converter.convert(amount=Decimal('1'), from_currency='USD', to_currency='JPY')
