from datetime import datetime, timedelta, timezone
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    ChangeNotEligibleError,
    DomainError,
    PaymentInitiationError,
    SoldOutError,
    TicketNotFoundError,
    TripNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.command.process_ticket_change_use_case import (
    ProcessTicketChangeUseCase,
)
from src.service.airline_ticketing.app.dto.ticket_change_result import (
    TicketChangeResult,
    TicketChangeStatus,
)
from src.service.airline_ticketing.app.interface.i_currency_converter import ICurrencyConverter
from src.service.airline_ticketing.app.interface.i_payment_gateway import IPaymentGateway
from src.service.airline_ticketing.domain.change_amount_calculator import (
    quote_change,
    target_seat_class,
)
from src.service.airline_ticketing.domain.change_eligibility_checker import (
    check_change_eligibility,
)
from src.service.airline_ticketing.domain.entity.pending_ticket_change_entity import (
    PendingTicketChange,
)
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote


class RequestTicketChangeUseCase:
    """
    Start a ticket change.

    Flow:
    1. Ownership and eligibility (reason shown verbatim on denial)
    2. Target validation: trip exists, differs from the current trip+class,
       target class not sold out
    3. Quote
    4. Nothing due -> apply right away (COMPLETED)
       Money due  -> persist a pending intent and return the gateway URL
                     (PAYMENT_REQUIRED); the ticket is untouched until the
                     callback confirms payment
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        payment_gateway: IPaymentGateway,
        currency_converter: ICurrencyConverter,
        process_ticket_change: ProcessTicketChangeUseCase,
    ) -> None:
        self.uow = uow
        self.payment_gateway = payment_gateway
        self.currency_converter = currency_converter
        self.process_ticket_change = process_ticket_change

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        currency_converter: ICurrencyConverter = Depends(Provide[Container.currency_converter]),
    ) -> Self:
        return cls(
            uow=uow,
            payment_gateway=payment_gateway,
            currency_converter=currency_converter,
            process_ticket_change=ProcessTicketChangeUseCase(uow=uow),
        )

    @Logger.io
    async def execute(
        self,
        *,
        ticket_id: int,
        user_id: int,
        new_trip_id: int,
        new_seat_class: SeatClass | str | None = None,
        reason: str | None = None,
        bank_code: str | None = None,
        client_ip: str | None = None,
        now: datetime | None = None,
    ) -> TicketChangeResult:
        now = now or datetime.now(timezone.utc)

        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_id(ticket_id)
            if not ticket or ticket.user_id != user_id:
                raise TicketNotFoundError()

            trip = await self.uow.trip_repo.get_by_id(ticket.trip_id)
            eligibility = check_change_eligibility(
                ticket=ticket,
                trip=trip,
                now=now,
                min_hours_before_departure=settings.TICKET_CHANGE_MIN_HOURS_BEFORE_DEPARTURE,
            )
            if not eligibility.allowed or trip is None:
                raise ChangeNotEligibleError(eligibility.reason or 'Ticket cannot be changed.')

            new_trip = await self.uow.trip_repo.get_by_id(new_trip_id)
            if not new_trip:
                raise TripNotFoundError('The selected flight was not found')

            seat_class = target_seat_class(ticket, new_seat_class)
            if new_trip.id == trip.id and seat_class == ticket.seat_class:
                raise DomainError('Please choose a different flight or seat class')
            if new_trip.remaining_seats(seat_class) <= 0:
                raise SoldOutError(f'{seat_class} is sold out on the selected flight')

            quote = quote_change(
                original_ticket=ticket,
                original_trip=trip,
                new_trip=new_trip,
                change_fee=eligibility.change_fee,
                new_seat_class=seat_class,
            )

        if not quote.requires_payment:
            new_ticket = await self.process_ticket_change.apply(
                ticket_id=ticket_id,
                user_id=user_id,
                new_trip_id=new_trip_id,
                target_seat_class=quote.target_seat_class,
                change_fee=quote.change_fee,
                price_difference=quote.price_difference,
                reason=reason,
                now=now,
            )
            return TicketChangeResult(
                status=TicketChangeStatus.COMPLETED, quote=quote, new_ticket=new_ticket
            )

        return await self._start_payment(
            ticket=ticket,
            new_trip_id=new_trip_id,
            quote=quote,
            reason=reason,
            bank_code=bank_code,
            client_ip=client_ip,
            now=now,
        )

    async def _start_payment(
        self,
        *,
        ticket: Ticket,
        new_trip_id: int,
        quote: ChangeQuote,
        reason: str | None,
        bank_code: str | None,
        client_ip: str | None,
        now: datetime,
    ) -> TicketChangeResult:
        pending = PendingTicketChange.open(
            ticket_id=ticket.id,  # type: ignore[arg-type]
            user_id=ticket.user_id,
            new_trip_id=new_trip_id,
            quote=quote,
            reason=reason,
            ttl=timedelta(minutes=settings.PENDING_CHANGE_TTL_MINUTES),
            now=now,
        )

        async with self.uow:
            # A new request replaces whatever intent the ticket had before
            await self.uow.pending_ticket_change_repo.delete_for_ticket(ticket_id=ticket.id)  # type: ignore[arg-type]
            pending = await self.uow.pending_ticket_change_repo.add(pending)

            try:
                gateway_amount = self.currency_converter.convert(
                    amount=quote.total_due,
                    from_currency=settings.BASE_CURRENCY,
                    to_currency=settings.GATEWAY_CURRENCY,
                )
                payment_url = self.payment_gateway.create_payment_url(
                    amount=gateway_amount,
                    description=f'Ticket change {ticket.pnr or ticket.id}',
                    bank_code=bank_code,
                    transaction_ref=pending.token,
                    client_ip=client_ip,
                )
            except Exception as e:
                Logger.base.error(f'[PAYMENT] could not start payment for ticket {ticket.id}: {e}')
                raise PaymentInitiationError() from e

            await self.uow.commit()

        Logger.base.info(
            f'[TICKET-CHANGE] ticket {ticket.id} waiting for payment of {quote.total_due} '
            f'{settings.BASE_CURRENCY} (txn {pending.token})'
        )
        return TicketChangeResult(
            status=TicketChangeStatus.PAYMENT_REQUIRED,
            quote=quote,
            payment_url=payment_url,
            pending_token=pending.token,
        )
