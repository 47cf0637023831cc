from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SeatAssignRequest(BaseModel):
    seat_number: str

    class Config:
        json_schema_extra = {'example': {'seat_number': '12C'}}


class CheckInRequest(BaseModel):
    seat_number: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'seat_number': '3A'}}


class TicketResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 42,
                'trip_id': 7,
                'user_id': 3,
                'pnr': 'K7M2QX',
                'seat_class': 'Economy',
                'seat_number': '12C',
                'total_price': '120.00',
                'payment_status': 'Success',
                'passenger_name': 'Nguyen Van A',
                'is_checked_in': False,
                'is_cancelled': False,
                'booking_date': '2026-01-10T10:30:00Z',
            }
        }
    )

    id: Optional[int]
    trip_id: int
    user_id: int
    pnr: Optional[str]
    seat_class: str
    seat_number: str
    total_price: Decimal
    payment_status: str
    passenger_name: Optional[str] = None
    is_checked_in: bool
    check_in_time: Optional[datetime] = None
    is_cancelled: bool
    cancelled_at: Optional[datetime] = None
    booking_date: datetime


class ChangeEligibilityResponse(BaseModel):
    allowed: bool
    reason: Optional[str] = None
    change_fee: Decimal
    hours_before_departure: Optional[float] = None

    class Config:
        json_schema_extra = {
            'example': {
                'allowed': True,
                'reason': None,
                'change_fee': '15',
                'hours_before_departure': 26.5,
            }
        }


class TicketChangeRequest(BaseModel):
    new_trip_id: int
    new_seat_class: Optional[str] = None  # Keep the current class when omitted
    reason: Optional[str] = None
    bank_code: Optional[str] = None

    class Config:
        json_schema_extra = {
            'examples': [
                {'new_trip_id': 9, 'new_seat_class': 'Business', 'bank_code': 'NCB'},
                {'new_trip_id': 9},
            ]
        }


class ChangeQuoteResponse(BaseModel):
    target_seat_class: str
    original_price: Decimal
    new_price: Decimal
    change_fee: Decimal
    price_difference: Decimal
    total_due: Decimal
    refund_amount: Decimal

    class Config:
        json_schema_extra = {
            'example': {
                'target_seat_class': 'Economy',
                'original_price': '100.00',
                'new_price': '120.00',
                'change_fee': '15',
                'price_difference': '20.00',
                'total_due': '35.00',
                'refund_amount': '0',
            }
        }


class TicketChangeResponse(BaseModel):
    status: str
    quote: ChangeQuoteResponse
    new_ticket: Optional[TicketResponse] = None
    payment_url: Optional[str] = None
    pending_token: Optional[str] = None
