"""
VNPay redirect gateway (API version 2.1.0)

Outgoing: every vnp_* parameter sorted by key, url-encoded, signed with
HMAC-SHA512 over the encoded query. Amounts are VND x 100.
Incoming: the callback query is re-encoded the same way (minus the hash
fields) and the signature compared in constant time.
"""

from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
import hashlib
import hmac
from typing import Mapping
from urllib.parse import quote_plus, urlencode

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import PaymentVerificationError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.dto.payment_callback_result import PaymentCallbackResult
from src.service.airline_ticketing.app.interface.i_payment_gateway import IPaymentGateway


VNPAY_SUCCESS_CODE = '00'
VNPAY_TIMEZONE = timezone(timedelta(hours=7))
# vnp_IpAddr is mandatory; used when the caller's address is unknown
FALLBACK_CLIENT_IP = '127.0.0.1'
_HASH_FIELDS = ('vnp_SecureHash', 'vnp_SecureHashType')


def encode_vnpay_query(params: Mapping[str, str]) -> str:
    return urlencode(sorted(params.items()), quote_via=quote_plus)


def sign_vnpay_query(query: str, hash_secret: str) -> str:
    return hmac.new(hash_secret.encode(), query.encode(), hashlib.sha512).hexdigest()


class VnpayPaymentGatewayImpl(IPaymentGateway):
    def __init__(self, *, settings: Settings) -> None:
        self.tmn_code = settings.VNPAY_TMN_CODE
        self.hash_secret = settings.VNPAY_HASH_SECRET.get_secret_value()
        self.payment_url = settings.VNPAY_PAYMENT_URL
        self.callback_url = settings.VNPAY_CALLBACK_URL
        self.version = settings.VNPAY_VERSION
        self.locale = settings.VNPAY_LOCALE
        self.currency = settings.GATEWAY_CURRENCY

    @Logger.io
    def create_payment_url(
        self,
        *,
        amount: Decimal,
        description: str,
        bank_code: str | None,
        transaction_ref: str,
        client_ip: str | None = None,
    ) -> str:
        whole_amount = int(amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
        if whole_amount <= 0:
            raise ValueError(f'Payment amount must be positive, got {amount}')

        params = {
            'vnp_Version': self.version,
            'vnp_Command': 'pay',
            'vnp_TmnCode': self.tmn_code,
            'vnp_Amount': str(whole_amount * 100),
            'vnp_CurrCode': self.currency,
            'vnp_TxnRef': transaction_ref,
            'vnp_OrderInfo': description,
            'vnp_OrderType': 'other',
            'vnp_Locale': self.locale,
            'vnp_ReturnUrl': self.callback_url,
            'vnp_IpAddr': client_ip or FALLBACK_CLIENT_IP,
            'vnp_CreateDate': datetime.now(VNPAY_TIMEZONE).strftime('%Y%m%d%H%M%S'),
        }
        if bank_code:
            params['vnp_BankCode'] = bank_code

        query = encode_vnpay_query(params)
        secure_hash = sign_vnpay_query(query, self.hash_secret)
        Logger.base.info(f'[PAYMENT] VNPay url built for txn {transaction_ref}')
        return f'{self.payment_url}?{query}&vnp_SecureHash={secure_hash}'

    @Logger.io
    def parse_callback(self, params: Mapping[str, str]) -> PaymentCallbackResult:
        received_hash = params.get('vnp_SecureHash', '')
        signed = {
            key: value
            for key, value in params.items()
            if key.startswith('vnp_') and key not in _HASH_FIELDS
        }
        expected_hash = sign_vnpay_query(encode_vnpay_query(signed), self.hash_secret)
        if not received_hash or not hmac.compare_digest(expected_hash, received_hash.lower()):
            raise PaymentVerificationError()

        transaction_ref = signed.get('vnp_TxnRef')
        if not transaction_ref:
            raise PaymentVerificationError('Payment callback has no transaction reference')

        response_code = signed.get('vnp_ResponseCode', '')
        transaction_status = signed.get('vnp_TransactionStatus', VNPAY_SUCCESS_CODE)
        raw_amount = signed.get('vnp_Amount')

        return PaymentCallbackResult(
            success=response_code == VNPAY_SUCCESS_CODE
            and transaction_status == VNPAY_SUCCESS_CODE,
            transaction_ref=transaction_ref,
            response_code=response_code,
            gateway_transaction_no=signed.get('vnp_TransactionNo'),
            amount=Decimal(raw_amount) / 100 if raw_amount else None,
        )
