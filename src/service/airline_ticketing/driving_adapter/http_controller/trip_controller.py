from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.query.calculate_round_trip_price_use_case import (
    CalculateRoundTripPriceUseCase,
)
from src.service.airline_ticketing.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.driving_adapter.http_controller.schema.trip_schema import (
    RoundTripPriceResponse,
    SeatMapResponse,
    SeatResponse,
)


router = APIRouter()


@router.get('/round_trip_price')
@Logger.io
async def get_round_trip_price(
    outbound_trip_id: int,
    return_trip_id: int,
    outbound_class: str,
    return_class: str | None = None,
    use_case: CalculateRoundTripPriceUseCase = Depends(CalculateRoundTripPriceUseCase.depends),
) -> RoundTripPriceResponse:
    breakdown = await use_case.execute(
        outbound_trip_id=outbound_trip_id,
        return_trip_id=return_trip_id,
        outbound_class=SeatClass.parse(outbound_class),
        return_class=SeatClass.parse(return_class) if return_class else None,
    )
    return RoundTripPriceResponse(
        outbound_price=breakdown.outbound_price,
        return_price=breakdown.return_price,
        subtotal=breakdown.subtotal,
        discount_percent=breakdown.discount_percent,
        discount_amount=breakdown.discount_amount,
        total_price=breakdown.total_price,
        savings_amount=breakdown.savings_amount,
    )


@router.get('/{trip_id}/seat_map')
@Logger.io(truncate_content=True)
async def get_seat_map(
    trip_id: int,
    seat_class: str = Query(default=SeatClass.ECONOMY.value),
    use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> SeatMapResponse:
    seat_map = await use_case.execute(trip_id=trip_id, seat_class=SeatClass.parse(seat_class))
    return SeatMapResponse(
        trip_id=seat_map.trip_id,
        seat_class=seat_map.seat_class.value,
        total_seats=seat_map.total_seats,
        available_seats=seat_map.available_seats,
        booked_seats=seat_map.booked_seats,
        total_rows=seat_map.total_rows,
        seats_per_row=seat_map.seats_per_row,
        seats=[
            SeatResponse(
                seat_number=seat.seat_number,
                row=seat.row,
                column=seat.column,
                column_letter=seat.column_letter,
                is_available=seat.is_available,
                position=seat.position.value,
            )
            for seat in seat_map.seats
        ],
    )
