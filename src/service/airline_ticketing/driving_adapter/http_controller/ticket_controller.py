from fastapi import APIRouter, Depends, Request, status

from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.command.assign_seat_use_case import AssignSeatUseCase
from src.service.airline_ticketing.app.command.check_in_use_case import CheckInUseCase
from src.service.airline_ticketing.app.command.confirm_ticket_change_payment_use_case import (
    ConfirmTicketChangePaymentUseCase,
)
from src.service.airline_ticketing.app.command.request_ticket_change_use_case import (
    RequestTicketChangeUseCase,
)
from src.service.airline_ticketing.app.dto.ticket_change_result import TicketChangeResult
from src.service.airline_ticketing.app.query.calculate_change_amount_use_case import (
    CalculateChangeAmountUseCase,
)
from src.service.airline_ticketing.app.query.check_change_eligibility_use_case import (
    CheckChangeEligibilityUseCase,
)
from src.service.airline_ticketing.app.query.lookup_ticket_by_pnr_use_case import (
    LookupTicketByPnrUseCase,
)
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote
from src.service.airline_ticketing.driving_adapter.http_controller.auth.caller_identity import (
    get_caller_id,
)
from src.service.airline_ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    ChangeEligibilityResponse,
    ChangeQuoteResponse,
    CheckInRequest,
    SeatAssignRequest,
    TicketChangeRequest,
    TicketChangeResponse,
    TicketResponse,
)


router = APIRouter()


def to_ticket_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        trip_id=ticket.trip_id,
        user_id=ticket.user_id,
        pnr=ticket.pnr,
        seat_class=ticket.seat_class.value,
        seat_number=ticket.seat_number,
        total_price=ticket.total_price,
        payment_status=ticket.payment_status.value,
        passenger_name=ticket.passenger_name,
        is_checked_in=ticket.is_checked_in,
        check_in_time=ticket.check_in_time,
        is_cancelled=ticket.is_cancelled,
        cancelled_at=ticket.cancelled_at,
        booking_date=ticket.booking_date,
    )


def to_quote_response(quote: ChangeQuote) -> ChangeQuoteResponse:
    return ChangeQuoteResponse(
        target_seat_class=quote.target_seat_class.value,
        original_price=quote.original_price,
        new_price=quote.new_price,
        change_fee=quote.change_fee,
        price_difference=quote.price_difference,
        total_due=quote.total_due,
        refund_amount=quote.refund_amount,
    )


def to_change_response(result: TicketChangeResult) -> TicketChangeResponse:
    return TicketChangeResponse(
        status=result.status.value,
        quote=to_quote_response(result.quote),
        new_ticket=to_ticket_response(result.new_ticket) if result.new_ticket else None,
        payment_url=result.payment_url,
        pending_token=result.pending_token,
    )


# The callback route is declared before the /{ticket_id} routes
@router.get('/change/payment_callback')
@Logger.io
async def ticket_change_payment_callback(
    request: Request,
    use_case: ConfirmTicketChangePaymentUseCase = Depends(
        ConfirmTicketChangePaymentUseCase.depends
    ),
) -> TicketChangeResponse:
    result = await use_case.execute(callback_params=dict(request.query_params))
    return to_change_response(result)


@router.get('/pnr/{pnr}')
@Logger.io
async def lookup_ticket_by_pnr(
    pnr: str,
    user_id: int = Depends(get_caller_id),
    use_case: LookupTicketByPnrUseCase = Depends(LookupTicketByPnrUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(pnr=pnr, user_id=user_id)
    return to_ticket_response(ticket)


@router.post('/{ticket_id}/seat', status_code=status.HTTP_200_OK)
@Logger.io
async def select_seat(
    ticket_id: int,
    request: SeatAssignRequest,
    user_id: int = Depends(get_caller_id),
    use_case: AssignSeatUseCase = Depends(AssignSeatUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.change_seat(
        ticket_id=ticket_id, new_seat_number=request.seat_number, user_id=user_id
    )
    return to_ticket_response(ticket)


@router.post('/{ticket_id}/check_in', status_code=status.HTTP_200_OK)
@Logger.io
async def check_in(
    ticket_id: int,
    request: CheckInRequest,
    user_id: int = Depends(get_caller_id),
    use_case: CheckInUseCase = Depends(CheckInUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(
        ticket_id=ticket_id, user_id=user_id, seat_number=request.seat_number
    )
    return to_ticket_response(ticket)


@router.get('/{ticket_id}/change/eligibility')
@Logger.io
async def get_change_eligibility(
    ticket_id: int,
    user_id: int = Depends(get_caller_id),
    use_case: CheckChangeEligibilityUseCase = Depends(CheckChangeEligibilityUseCase.depends),
) -> ChangeEligibilityResponse:
    eligibility = await use_case.execute(ticket_id=ticket_id, user_id=user_id)
    return ChangeEligibilityResponse(
        allowed=eligibility.allowed,
        reason=eligibility.reason,
        change_fee=eligibility.change_fee,
        hours_before_departure=eligibility.hours_before_departure,
    )


@router.post('/{ticket_id}/change/quote')
@Logger.io
async def quote_ticket_change(
    ticket_id: int,
    request: TicketChangeRequest,
    user_id: int = Depends(get_caller_id),
    use_case: CalculateChangeAmountUseCase = Depends(CalculateChangeAmountUseCase.depends),
) -> ChangeQuoteResponse:
    quote = await use_case.execute(
        ticket_id=ticket_id,
        user_id=user_id,
        new_trip_id=request.new_trip_id,
        new_seat_class=SeatClass.parse(request.new_seat_class) if request.new_seat_class else None,
    )
    return to_quote_response(quote)


@router.post('/{ticket_id}/change', status_code=status.HTTP_200_OK)
@Logger.io
async def request_ticket_change(
    ticket_id: int,
    request: TicketChangeRequest,
    http_request: Request,
    user_id: int = Depends(get_caller_id),
    use_case: RequestTicketChangeUseCase = Depends(RequestTicketChangeUseCase.depends),
) -> TicketChangeResponse:
    result = await use_case.execute(
        ticket_id=ticket_id,
        user_id=user_id,
        new_trip_id=request.new_trip_id,
        new_seat_class=SeatClass.parse(request.new_seat_class) if request.new_seat_class else None,
        reason=request.reason,
        bank_code=request.bank_code,
        client_ip=http_request.client.host if http_request.client else None,
    )
    return to_change_response(result)
