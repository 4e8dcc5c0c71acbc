"""Price observation model (read-only for the GPS engine)."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class PriceRecord(Base):
    __tablename__ = "prices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    region_code: Mapped[str | None] = mapped_column(
        ForeignKey("regions.code", ondelete="SET NULL"), nullable=True, index=True
    )
    gps_lat: Mapped[Decimal | None] = mapped_column(Numeric(10, 8), nullable=True)
    gps_lng: Mapped[Decimal | None] = mapped_column(Numeric(11, 8), nullable=True)
    recorded_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
