"""
PNR (Passenger Name Record) codes

Six characters from an alphabet without the look-alikes 0/O and 1/I/L, so
a code can be read out over the phone.
"""

import secrets
from typing import Awaitable, Callable

from src.platform.exception.exceptions import PnrGenerationError
from src.platform.logging.loguru_io import Logger


PNR_ALPHABET = 'ABCDEFGHJKMNPQRSTUVWXYZ23456789'
PNR_LENGTH = 6
MAX_PNR_ATTEMPTS = 5


def generate_pnr() -> str:
    return ''.join(secrets.choice(PNR_ALPHABET) for _ in range(PNR_LENGTH))


def is_valid_pnr_format(pnr: str | None) -> bool:
    if not pnr or len(pnr) != PNR_LENGTH:
        return False
    return all(char in PNR_ALPHABET for char in pnr.upper())


async def generate_unique_pnr(
    pnr_exists: Callable[[str], Awaitable[bool]],
    *,
    max_attempts: int = MAX_PNR_ATTEMPTS,
    generator: Callable[[], str] = generate_pnr,
) -> str:
    for attempt in range(1, max_attempts + 1):
        pnr = generator()
        if not await pnr_exists(pnr):
            return pnr
        Logger.base.warning(f'[PNR] collision on attempt {attempt}/{max_attempts}')

    raise PnrGenerationError(f'Could not generate a unique PNR after {max_attempts} attempts')
