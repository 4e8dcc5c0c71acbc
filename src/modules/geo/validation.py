"""Single-point GPS validation."""

from __future__ import annotations

from src.modules.geo.accuracy import AccuracyClassifier
from src.modules.geo.bounds import BoundsChecker
from src.modules.geo.models import AccuracyLevel, Coordinate, ValidationResult
from src.modules.geo.ports import RegionDirectory
from src.modules.geo.region import RegionConsistencyChecker
from src.modules.geo.scoring import QualityScorer
from src.utils.logger import get_logger
from src.utils.settings.geo import GeoValidationSettings

logger = get_logger(__name__)


class CoordinateValidator:
    """
    Validates a coordinate against country bounds, accuracy, region and
    plausibility, and scores it.

    Only the country-bounds check can make a result invalid. Region
    consistency is checked only when a region code is given and a region
    checker is configured.
    """

    def __init__(
        self,
        bounds: BoundsChecker,
        accuracy: AccuracyClassifier | None = None,
        region_checker: RegionConsistencyChecker | None = None,
        scorer: QualityScorer | None = None,
        country_name: str = "the country",
    ):
        self.bounds = bounds
        self.accuracy = accuracy or AccuracyClassifier()
        self.region_checker = region_checker
        self.scorer = scorer or QualityScorer()
        self.country_name = country_name

    @classmethod
    def from_settings(
        cls,
        settings: GeoValidationSettings,
        region_directory: RegionDirectory | None = None,
    ) -> CoordinateValidator:
        region_checker = None
        if region_directory is not None:
            region_checker = RegionConsistencyChecker(
                region_directory, settings.GEO_REGION_CONSISTENCY_THRESHOLD_M
            )
        return cls(
            bounds=BoundsChecker.from_settings(settings),
            accuracy=AccuracyClassifier(settings.GEO_ACCURACY_THRESHOLDS),
            region_checker=region_checker,
            country_name=settings.GEO_COUNTRY_NAME,
        )

    async def validate(
        self,
        coordinate: Coordinate,
        accuracy: float | None = None,
        region_code: str | None = None,
    ) -> ValidationResult:
        if coordinate is None:
            raise TypeError("validate() requires a coordinate")

        region_code = region_code.strip() if region_code else None
        result = ValidationResult(
            coordinate=coordinate, accuracy=accuracy, region_code=region_code or None
        )

        if not self.bounds.is_within_country(coordinate):
            result.add_error(
                f"GPS coordinates are outside {self.country_name} boundaries"
            )
            result.valid = False
            logger.debug(
                "GPS coordinates rejected",
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
            )
            return result

        result.accuracy_level = self.accuracy.classify(accuracy)
        match result.accuracy_level:
            case AccuracyLevel.POOR:
                result.add_warning(
                    f"GPS accuracy is poor (>{self.accuracy.fair_limit:g}m)"
                )
            case AccuracyLevel.INVALID:
                result.add_warning(
                    f"GPS accuracy exceeds the acceptable limit "
                    f"({self.accuracy.acceptable_limit:g}m)"
                )
            case AccuracyLevel.UNKNOWN:
                result.add_warning("GPS accuracy was not reported")

        if result.region_code and self.region_checker is not None:
            consistency = await self.region_checker.check(coordinate, result.region_code)
            result.region_consistency = consistency
            if not consistency.consistent:
                if consistency.distance_from_region_m is not None:
                    result.add_warning(
                        "GPS coordinates may not be consistent with selected region: "
                        f"{consistency.distance_from_region_m}m from region center"
                    )
                else:
                    result.add_warning(
                        "GPS coordinates may not be consistent with selected region: "
                        f"{consistency.reason}"
                    )

        plausibility = self.bounds.check_plausibility(coordinate)
        result.plausibility = plausibility
        if not plausibility.plausible:
            result.add_warning(
                f"GPS coordinates may not be plausible: {plausibility.reason}"
            )

        result.quality_score = self.scorer.score(
            result.accuracy_level, result.region_consistency, result.plausibility
        )
        result.valid = True

        logger.debug(
            "GPS validation completed",
            valid=result.valid,
            quality_score=result.quality_score,
            warnings=len(result.warnings),
        )
        return result

    async def validate_price_submission(
        self,
        gps_lat: float | None,
        gps_lng: float | None,
        region_code: str | None = None,
    ) -> ValidationResult | None:
        """Validate the GPS part of a price submission; None if it carries no GPS.

        Submissions do not report an accuracy radius.
        """
        if gps_lat is None or gps_lng is None:
            return None
        return await self.validate(Coordinate(gps_lat, gps_lng), None, region_code)
