from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class TripModel(Base):
    __tablename__ = 'trip'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('company.id'), nullable=False, index=True
    )
    plane_name: Mapped[str] = mapped_column(String(100), nullable=False, default='')
    from_city: Mapped[str] = mapped_column(String(100), nullable=False)
    to_city: Mapped[str] = mapped_column(String(100), nullable=False)
    departure_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    arrival_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    economy_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    business_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    first_class_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    economy_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    business_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    first_class_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    round_trip_discount_percent: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 2), nullable=True
    )

    __table_args__ = (
        CheckConstraint('economy_seats >= 0', name='ck_trip_economy_seats_non_negative'),
        CheckConstraint('business_seats >= 0', name='ck_trip_business_seats_non_negative'),
        CheckConstraint('first_class_seats >= 0', name='ck_trip_first_class_seats_non_negative'),
    )
