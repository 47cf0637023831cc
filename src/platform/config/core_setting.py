from decimal import Decimal
from pathlib import Path
from typing import Dict, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Airline Ticketing'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'airline_ticketing'
    DATABASE_URL_OVERRIDE: str = ''  # e.g. sqlite+aiosqlite:///./local.db

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}@'
            f'{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Ticket change policy
    TICKET_CHANGE_MIN_HOURS_BEFORE_DEPARTURE: int = 3
    PENDING_CHANGE_TTL_MINUTES: int = 30
    PNR_MAX_RETRIES: int = 5

    # Online check-in window
    CHECK_IN_OPEN_HOURS: int = 24
    CHECK_IN_CLOSE_MINUTES: int = 60

    # VNPay gateway
    VNPAY_TMN_CODE: str = 'DEMO0001'
    VNPAY_HASH_SECRET: SecretStr = SecretStr('test_vnpay_hash_secret')
    VNPAY_PAYMENT_URL: str = 'https://sandbox.vnpayment.vn/paymentv2/vpcpay.html'
    VNPAY_CALLBACK_URL: str = 'http://localhost:8000/api/ticket/change/payment_callback'
    VNPAY_VERSION: str = '2.1.0'
    VNPAY_LOCALE: str = 'vn'

    # Currency (amounts are priced in BASE_CURRENCY, the gateway charges GATEWAY_CURRENCY)
    BASE_CURRENCY: str = 'USD'
    GATEWAY_CURRENCY: str = 'VND'
    CURRENCY_RATES: Dict[str, Decimal] = {'USD': Decimal('1'), 'VND': Decimal('25000')}


settings = Settings()  # type: ignore
