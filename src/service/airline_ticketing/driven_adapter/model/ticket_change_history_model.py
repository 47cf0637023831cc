from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class TicketChangeHistoryModel(Base):
    __tablename__ = 'ticket_change_history'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    original_ticket_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket.id'), nullable=False, index=True
    )
    new_ticket_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket.id'), nullable=False, index=True
    )
    change_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    change_fee: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    price_difference: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    total_amount_paid: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    change_reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
