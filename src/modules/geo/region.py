"""Consistency between a coordinate and its declared region."""

from src.modules.geo.distance import display_m, distance_m
from src.modules.geo.exceptions import RegionLookupError
from src.modules.geo.models import Coordinate, RegionConsistency
from src.modules.geo.ports import RegionDirectory
from src.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_THRESHOLD_M = 50_000.0

REGION_NOT_FOUND = "Region not found"
NO_CENTROID = "Region has no GPS coordinates - validation skipped"
WITHIN_RANGE = "Coordinates are within reasonable distance from region center"
TOO_FAR = "Coordinates are too far from region center"


class RegionConsistencyChecker:
    """Flags coordinates lying further than a threshold from the region centroid."""

    def __init__(
        self,
        directory: RegionDirectory,
        threshold_m: float = DEFAULT_THRESHOLD_M,
    ):
        self.directory = directory
        self.threshold_m = threshold_m

    async def check(self, coordinate: Coordinate, region_code: str) -> RegionConsistency:
        try:
            region = await self.directory.lookup_region(region_code)
        except RegionLookupError as exc:
            logger.error(
                "Error validating region consistency",
                region_code=region_code,
                error=str(exc),
            )
            return RegionConsistency(
                consistent=False,
                reason=f"Error validating region consistency: {exc.detail}",
            )

        if region is None or not region.active:
            return RegionConsistency(consistent=False, reason=REGION_NOT_FOUND)

        centroid = region.centroid
        if centroid is None:
            return RegionConsistency(consistent=True, reason=NO_CENTROID)

        distance = distance_m(coordinate, centroid)
        consistent = distance <= self.threshold_m
        return RegionConsistency(
            consistent=consistent,
            reason=WITHIN_RANGE if consistent else TOO_FAR,
            distance_from_region_m=display_m(distance),
            region_center_lat=centroid.latitude,
            region_center_lng=centroid.longitude,
        )
