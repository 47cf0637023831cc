from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    InvalidSeatError,
    SeatAssignmentFailedError,
    SeatTakenError,
    TicketNotFoundError,
    TripNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.domain.entity.ticket_entity import Ticket
from src.service.airline_ticketing.domain.seat_map_generator import (
    normalize_seat_number,
    seat_number_fits_layout,
    seats_per_row_for,
)


class AssignSeatUseCase:
    """
    The only writer of a ticket's seat number.

    Flow:
    1. Pre-check outside the transaction: ticket exists, seat is
       '{row}{letter}' within the class row width, seat looks free
    2. In one unit of work: re-read the ticket FOR UPDATE, re-check the seat
       against the live ticket table, write, commit
    3. A unique index violation (another caller won the seat) becomes
       SeatTakenError; nothing is written on any failure
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def assign_seat(
        self, *, ticket_id: int, seat_number: str, user_id: int | None = None
    ) -> Ticket:
        ticket, seat = await self._pre_check(
            ticket_id=ticket_id, seat_number=seat_number, user_id=user_id
        )
        return await self._write_seat(ticket=ticket, seat=seat)

    @Logger.io
    async def change_seat(
        self, *, ticket_id: int, new_seat_number: str, user_id: int | None = None
    ) -> Ticket:
        ticket, seat = await self._pre_check(
            ticket_id=ticket_id, seat_number=new_seat_number, user_id=user_id
        )
        if ticket.holds_seat(seat):
            return ticket
        return await self._write_seat(ticket=ticket, seat=seat)

    async def _pre_check(
        self, *, ticket_id: int, seat_number: str, user_id: int | None
    ) -> tuple[Ticket, str]:
        seat = normalize_seat_number(seat_number)

        async with self.uow:
            ticket = await self.uow.ticket_repo.get_by_id(ticket_id)
            if not ticket or (user_id is not None and ticket.user_id != user_id):
                raise TicketNotFoundError()
            if ticket.is_cancelled:
                raise InvalidSeatError('Cannot select a seat on a cancelled ticket')

            trip = await self.uow.trip_repo.get_by_id(ticket.trip_id)
            if not trip:
                raise TripNotFoundError()

            # The remaining counter shrinks with sales, so only the row width bounds the seat
            if not seat_number_fits_layout(seat, seats_per_row_for(ticket.seat_class)):
                raise InvalidSeatError(f'Seat {seat} does not exist in {ticket.seat_class}')

            if not ticket.holds_seat(seat) and not await self.uow.ticket_repo.is_seat_available(
                trip_id=ticket.trip_id, seat_number=seat, exclude_ticket_id=ticket.id
            ):
                raise SeatTakenError(f'Seat {seat} is already taken')

        return ticket, seat

    async def _write_seat(self, *, ticket: Ticket, seat: str) -> Ticket:
        try:
            async with self.uow:
                locked = await self.uow.ticket_repo.get_by_id(ticket.id, for_update=True)  # type: ignore[arg-type]
                if not locked:
                    raise TicketNotFoundError()
                if locked.is_cancelled:
                    raise InvalidSeatError('Cannot select a seat on a cancelled ticket')

                if not await self.uow.ticket_repo.is_seat_available(
                    trip_id=locked.trip_id, seat_number=seat, exclude_ticket_id=locked.id
                ):
                    raise SeatTakenError(f'Seat {seat} is already taken')

                updated = await self.uow.ticket_repo.update(locked.with_seat(seat))
                await self.uow.commit()
        except SeatTakenError:
            raise
        except ConflictError as e:
            raise SeatTakenError(f'Seat {seat} is already taken') from e
        except CustomBaseError:
            raise
        except Exception as e:
            Logger.base.error(f'[SEAT-ASSIGN] ticket {ticket.id} seat {seat} rolled back: {e}')
            raise SeatAssignmentFailedError() from e

        Logger.base.info(f'[SEAT-ASSIGN] ticket {updated.id} now holds seat {updated.seat_number}')
        return updated
