"""SQLAlchemy-backed implementations of the region and price contracts."""

from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.models import PriceRecord, RegionRecord
from src.modules.geo.exceptions import PointSourceError, RegionLookupError
from src.modules.geo.models import Coordinate, PricePoint, Region
from src.utils.logger import get_logger

logger = get_logger(__name__)


def _as_float(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


class SqlRegionDirectory:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def lookup_region(self, code: str) -> Region | None:
        try:
            result = await self.db.execute(
                select(RegionRecord).where(
                    RegionRecord.code == code, RegionRecord.active.is_(True)
                )
            )
            record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Region lookup failed", region_code=code, error=str(e))
            raise RegionLookupError(code, str(e)) from e

        if record is None:
            return None
        return Region(
            code=record.code,
            name=record.name,
            centroid_lat=_as_float(record.center_latitude),
            centroid_lng=_as_float(record.center_longitude),
            active=record.active,
        )


class SqlPricePointSource:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_points(
        self,
        region_code: str | None,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[PricePoint]:
        query = select(PriceRecord).where(PriceRecord.active.is_(True))
        if region_code is not None:
            query = query.where(PriceRecord.region_code == region_code)
        if from_date is not None:
            query = query.where(PriceRecord.recorded_date >= from_date)
        if to_date is not None:
            query = query.where(PriceRecord.recorded_date <= to_date)
        query = query.order_by(PriceRecord.recorded_date, PriceRecord.id)

        try:
            result = await self.db.execute(query)
            records = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(
                "Price point lookup failed", region_code=region_code, error=str(e)
            )
            raise PointSourceError(str(e), region_code) from e

        return [self._to_point(record) for record in records]

    @staticmethod
    def _to_point(record: PriceRecord) -> PricePoint:
        coordinate = None
        if record.gps_lat is not None and record.gps_lng is not None:
            coordinate = Coordinate(float(record.gps_lat), float(record.gps_lng))
        return PricePoint(
            id=record.id,
            recorded_date=record.recorded_date,
            coordinate=coordinate,
            region_code=record.region_code,
        )
