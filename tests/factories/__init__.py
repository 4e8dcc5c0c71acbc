"""Test factories for the price GPS API."""

from .geo import CoordinateFactory, PricePointFactory, RegionFactory
from .records import PriceRecordFactory, RegionRecordFactory

__all__ = [
    "CoordinateFactory",
    "PricePointFactory",
    "RegionFactory",
    "PriceRecordFactory",
    "RegionRecordFactory",
]
