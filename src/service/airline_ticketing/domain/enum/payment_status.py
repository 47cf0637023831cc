from enum import StrEnum


class PaymentStatus(StrEnum):
    PENDING = 'Pending'
    SUCCESS = 'Success'
    FAILED = 'Failed'
