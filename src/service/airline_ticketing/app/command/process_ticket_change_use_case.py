from datetime import datetime, timezone
from decimal import Decimal
from typing import Self

from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    ChangeNotEligibleError,
    PnrGenerationError,
    SoldOutError,
    TicketChangeFailedError,
    TicketNotFoundError,
    TripNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.change_amount_calculator import total_change_amount
from src.service.airline_ticketing.domain.change_eligibility_checker import (
    CANCELLED_MESSAGE,
    CHECKED_IN_MESSAGE,
)
from src.service.airline_ticketing.domain.entity.payment_entity import Payment
from src.service.airline_ticketing.domain.entity.ticket_change_history_entity import (
    TicketChangeHistory,
)
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.enum.seat_class import SeatClass
from src.service.airline_ticketing.domain.fare_policy import price_for
from src.service.airline_ticketing.domain.pnr import generate_unique_pnr


class ProcessTicketChangeUseCase:
    """
    Atomic apply of a ticket change.

    One unit of work:
    - lock the original ticket and both trips, re-check the original is
      still active and the target class still has a seat
    - insert the replacement ticket with a fresh PNR
    - cancel the original
    - append the change history row
    - new trip counter -1, original trip counter +1 (original class)
    - payment row when money was due
    - drop the pending change intent

    Validation errors (not found, not eligible, sold out, PNR exhaustion)
    propagate unchanged after rollback. Anything else, a constraint
    ConflictError raised at flush or commit included, rolls back and becomes
    TicketChangeFailedError.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def apply(
        self,
        *,
        ticket_id: int,
        user_id: int,
        new_trip_id: int,
        target_seat_class: SeatClass,
        change_fee: Decimal,
        price_difference: Decimal,
        reason: str | None = None,
        transaction_code: str | None = None,
        now: datetime | None = None,
    ) -> Ticket:
        now = now or datetime.now(timezone.utc)
        total_due, _refund = total_change_amount(
            change_fee=change_fee, price_difference=price_difference
        )

        try:
            async with self.uow:
                original = await self.uow.ticket_repo.get_by_id(ticket_id, for_update=True)
                if not original or original.user_id != user_id:
                    raise TicketNotFoundError()
                if original.is_cancelled:
                    raise ChangeNotEligibleError(CANCELLED_MESSAGE)
                if original.is_checked_in:
                    raise ChangeNotEligibleError(CHECKED_IN_MESSAGE)

                # Lock in id order so two changes between the same trips cannot deadlock
                locked_trips = {
                    trip_id: await self.uow.trip_repo.get_by_id(trip_id, for_update=True)
                    for trip_id in sorted({original.trip_id, new_trip_id})
                }
                new_trip = locked_trips[new_trip_id]
                if not new_trip:
                    raise TripNotFoundError()
                if new_trip.remaining_seats(target_seat_class) <= 0:
                    raise SoldOutError(f'{target_seat_class} is sold out on the selected flight')

                pnr = await generate_unique_pnr(
                    self.uow.ticket_repo.pnr_exists, max_attempts=settings.PNR_MAX_RETRIES
                )
                new_ticket = await self.uow.ticket_repo.add(
                    Ticket.create_replacement(
                        original=original,
                        new_trip_id=new_trip.id,
                        seat_class=target_seat_class,
                        total_price=price_for(new_trip, target_seat_class),
                        pnr=pnr,
                        now=now,
                    )
                )
                await self.uow.ticket_repo.update(original.cancel(reason=reason, now=now))
                await self.uow.ticket_change_history_repo.add(
                    TicketChangeHistory.record(
                        original_ticket_id=original.id,  # type: ignore[arg-type]
                        new_ticket_id=new_ticket.id,  # type: ignore[arg-type]
                        change_fee=change_fee,
                        price_difference=price_difference,
                        change_reason=reason,
                        now=now,
                    )
                )

                if not await self.uow.trip_repo.decrement_seats(
                    trip_id=new_trip.id, seat_class=target_seat_class
                ):
                    raise SoldOutError(f'{target_seat_class} is sold out on the selected flight')
                await self.uow.trip_repo.increment_seats(
                    trip_id=original.trip_id, seat_class=original.seat_class
                )

                if total_due > 0:
                    await self.uow.payment_repo.add(
                        Payment.succeeded(
                            ticket_id=new_ticket.id,  # type: ignore[arg-type]
                            amount=total_due,
                            transaction_code=transaction_code,
                            now=now,
                        )
                    )

                await self.uow.pending_ticket_change_repo.delete_for_ticket(ticket_id=original.id)  # type: ignore[arg-type]
                await self.uow.commit()
        except (
            TicketNotFoundError,
            TripNotFoundError,
            ChangeNotEligibleError,
            SoldOutError,
            PnrGenerationError,
        ):
            raise
        except Exception as e:
            Logger.base.error(f'[TICKET-CHANGE] apply for ticket {ticket_id} rolled back: {e}')
            raise TicketChangeFailedError() from e

        Logger.base.info(
            f'[TICKET-CHANGE] ticket {ticket_id} -> {new_ticket.id} '
            f'(PNR {new_ticket.pnr}, trip {new_trip_id}, paid {total_due})'
        )
        return new_ticket
