"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.airline_ticketing.driven_adapter.currency.fixed_rate_currency_converter_impl import (
    FixedRateCurrencyConverterImpl,
)
from src.service.airline_ticketing.driven_adapter.payment.vnpay_payment_gateway_impl import (
    VnpayPaymentGatewayImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware engine, URL from settings)
    database = providers.Singleton(Database)

    # Payment gateway and currency conversion (stateless)
    payment_gateway = providers.Singleton(VnpayPaymentGatewayImpl, settings=config_service)
    currency_converter = providers.Singleton(
        FixedRateCurrencyConverterImpl, rates=config_service.provided.CURRENCY_RATES
    )


container = Container()


def setup() -> None:
    container.config_service()


async def cleanup() -> None:
    await container.database().dispose()
    container.reset_singletons()
