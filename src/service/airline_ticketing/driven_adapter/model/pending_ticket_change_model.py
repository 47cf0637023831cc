from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class PendingTicketChangeModel(Base):
    __tablename__ = 'pending_ticket_change'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    # One pending intent per ticket; a new request replaces the old one
    ticket_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket.id'), nullable=False, unique=True
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    new_trip_id: Mapped[int] = mapped_column(Integer, ForeignKey('trip.id'), nullable=False)
    target_seat_class: Mapped[str] = mapped_column(String(20), nullable=False)
    change_fee: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    price_difference: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    total_due: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    refund_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
