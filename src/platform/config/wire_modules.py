"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.airline_ticketing.app.command import (
    confirm_ticket_change_payment_use_case,
    request_ticket_change_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    request_ticket_change_use_case,
    confirm_ticket_change_payment_use_case,
]
