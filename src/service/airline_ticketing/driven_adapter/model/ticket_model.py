from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(Integer, ForeignKey('trip.id'), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    seat_class: Mapped[str] = mapped_column(String(20), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(10), nullable=False, default='')
    passenger_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    booking_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    payment_status: Mapped[str] = mapped_column(String(20), nullable=False)
    pnr: Mapped[Optional[str]] = mapped_column(String(6), nullable=True, unique=True)
    is_checked_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    check_in_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    is_cancelled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    cancelled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    cancellation_reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    ticket_type: Mapped[str] = mapped_column(String(20), nullable=False, default='one_way')
    outbound_ticket_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('ticket.id'), nullable=True
    )
    return_ticket_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('ticket.id'), nullable=True
    )
    booking_group_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    meal_option: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    baggage_option: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    add_on_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)

    __table_args__ = (
        # At most one active ticket per (trip, seat)
        Index(
            'uq_ticket_active_seat',
            'trip_id',
            'seat_number',
            unique=True,
            postgresql_where=text("is_cancelled = false AND seat_number <> ''"),
            sqlite_where=text("is_cancelled = 0 AND seat_number <> ''"),
        ),
    )
