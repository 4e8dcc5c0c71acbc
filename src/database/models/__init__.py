"""Database models read by the GPS engine."""

from .base import Base
from .prices import PriceRecord
from .regions import RegionRecord

__all__ = [
    "Base",
    "PriceRecord",
    "RegionRecord",
]
