"""
Test Configuration

Environment variables are set before any application module is imported,
because settings and the loguru sinks are built at import time.

Architecture:
- Unit tests: in-memory unit of work (test/service/airline_ticketing/conftest.py)
- Integration tests: real SQLAlchemy repositories on a throwaway SQLite file
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEBUG', 'false')
    os.environ.setdefault('DATABASE_URL_OVERRIDE', 'sqlite+aiosqlite:///:memory:')
    os.environ.setdefault('VNPAY_HASH_SECRET', 'test_vnpay_hash_secret')


_early_setup_test_environment()

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)
