"""Contracts for the engine's read-only external collaborators."""

from datetime import date
from typing import Protocol

from src.modules.geo.models import PricePoint, Region


class RegionDirectory(Protocol):
    async def lookup_region(self, code: str) -> Region | None:
        """Return the active region with this code, or None.

        Raises RegionLookupError when the directory itself is unavailable.
        """
        ...


class PricePointSource(Protocol):
    async def find_points(
        self,
        region_code: str | None,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[PricePoint]:
        """Return active points, optionally scoped to a region and date window.

        ``region_code=None`` means all regions; both dates are inclusive.
        Raises PointSourceError when the store is unavailable.
        """
        ...
