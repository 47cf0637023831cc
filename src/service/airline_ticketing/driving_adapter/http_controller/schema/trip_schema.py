from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict


class SeatResponse(BaseModel):
    seat_number: str
    row: int
    column: int
    column_letter: str
    is_available: bool
    position: str


class SeatMapResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'trip_id': 1,
                'seat_class': 'Economy',
                'total_seats': 12,
                'available_seats': 11,
                'booked_seats': 1,
                'total_rows': 2,
                'seats_per_row': 6,
                'seats': [
                    {
                        'seat_number': '1A',
                        'row': 1,
                        'column': 0,
                        'column_letter': 'A',
                        'is_available': False,
                        'position': 'Window',
                    },
                ],
            }
        }
    )

    trip_id: int
    seat_class: str
    total_seats: int
    available_seats: int
    booked_seats: int
    total_rows: int
    seats_per_row: int
    seats: List[SeatResponse]


class RoundTripPriceResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'outbound_price': '100.00',
                'return_price': '120.00',
                'subtotal': '220.00',
                'discount_percent': '10',
                'discount_amount': '22.00',
                'total_price': '198.00',
                'savings_amount': '22.00',
            }
        }
    )

    outbound_price: Decimal
    return_price: Decimal
    subtotal: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    total_price: Decimal
    savings_amount: Decimal
