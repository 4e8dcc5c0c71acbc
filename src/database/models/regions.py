"""Administrative region model (read-only for the GPS engine)."""

from decimal import Decimal

from sqlalchemy import Boolean, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class RegionRecord(Base):
    __tablename__ = "regions"

    code: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    center_latitude: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 8), nullable=True
    )
    center_longitude: Mapped[Decimal | None] = mapped_column(
        Numeric(11, 8), nullable=True
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True)
