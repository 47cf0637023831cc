from datetime import datetime, timezone
from typing import Mapping, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import PaymentDeclinedError, PendingChangeNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.command.process_ticket_change_use_case import (
    ProcessTicketChangeUseCase,
)
from src.service.airline_ticketing.app.dto.ticket_change_result import (
    TicketChangeResult,
    TicketChangeStatus,
)
from src.service.airline_ticketing.app.interface.i_payment_gateway import IPaymentGateway
from src.service.airline_ticketing.domain.value_object.change_quote import ChangeQuote


class ConfirmTicketChangePaymentUseCase:
    """Resume a ticket change from the payment gateway callback"""

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        payment_gateway: IPaymentGateway,
        process_ticket_change: ProcessTicketChangeUseCase,
    ) -> None:
        self.uow = uow
        self.payment_gateway = payment_gateway
        self.process_ticket_change = process_ticket_change

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
    ) -> Self:
        return cls(
            uow=uow,
            payment_gateway=payment_gateway,
            process_ticket_change=ProcessTicketChangeUseCase(uow=uow),
        )

    @Logger.io
    async def execute(
        self, *, callback_params: Mapping[str, str], now: datetime | None = None
    ) -> TicketChangeResult:
        now = now or datetime.now(timezone.utc)
        callback = self.payment_gateway.parse_callback(callback_params)

        async with self.uow:
            pending = await self.uow.pending_ticket_change_repo.get_by_token(
                token=callback.transaction_ref
            )
            if not pending or pending.is_expired(now):
                raise PendingChangeNotFoundError()

            if not callback.success:
                await self.uow.pending_ticket_change_repo.delete_for_ticket(
                    ticket_id=pending.ticket_id
                )
                await self.uow.commit()
                Logger.base.warning(
                    f'[PAYMENT] txn {callback.transaction_ref} declined '
                    f'(code {callback.response_code}), ticket {pending.ticket_id} unchanged'
                )
                raise PaymentDeclinedError(
                    f'Payment was not completed (code {callback.response_code}). '
                    'Your ticket has not been changed.'
                )

        new_ticket = await self.process_ticket_change.apply(
            ticket_id=pending.ticket_id,
            user_id=pending.user_id,
            new_trip_id=pending.new_trip_id,
            target_seat_class=pending.target_seat_class,
            change_fee=pending.change_fee,
            price_difference=pending.price_difference,
            reason=pending.reason,
            transaction_code=callback.gateway_transaction_no,
            now=now,
        )

        Logger.base.info(f'[PAYMENT] txn {callback.transaction_ref} confirmed, ticket {new_ticket.id}')
        return TicketChangeResult(
            status=TicketChangeStatus.COMPLETED,
            quote=ChangeQuote(
                target_seat_class=pending.target_seat_class,
                original_price=new_ticket.total_price - pending.price_difference,
                new_price=new_ticket.total_price,
                change_fee=pending.change_fee,
                price_difference=pending.price_difference,
                total_due=pending.total_due,
                refund_amount=pending.refund_amount,
            ),
            new_ticket=new_ticket,
        )
