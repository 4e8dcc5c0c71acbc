"""Factories for the read-only SQLAlchemy records."""

from datetime import date
from decimal import Decimal

import factory

from src.database.models import PriceRecord, RegionRecord


class RegionRecordFactory(factory.Factory):
    class Meta:
        model = RegionRecord

    code = factory.Sequence(lambda n: f"R{n:02d}")
    name = factory.Faker("city")
    center_latitude = Decimal("11.86360000")
    center_longitude = Decimal("-15.59770000")
    active = True


class PriceRecordFactory(factory.Factory):
    class Meta:
        model = PriceRecord

    id = factory.Sequence(lambda n: n + 1)
    region_code = "BS"
    gps_lat = Decimal("11.86000000")
    gps_lng = Decimal("-15.60000000")
    recorded_date = date(2024, 3, 15)
    active = True
