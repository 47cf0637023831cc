from enum import StrEnum


class PaymentMethod(StrEnum):
    VNPAY = 'VNPAY'
