"""GPS validation and spatial analysis settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.modules.geo.models import BoundingBox, ImplausibleZone

OCEAN_REASON = "Coordinates appear to be in the ocean"
UNINHABITED_REASON = "Coordinates appear to be in an uninhabited area"

# Guinea-Bissau
DEFAULT_COUNTRY_BOUNDS = BoundingBox(
    min_lat=10.5, max_lat=12.7, min_lng=-16.8, max_lng=-13.6
)

# Coarse strips along the edges of the country rectangle plus the
# mangrove belt. Heuristics, not surveyed boundaries. Each ocean strip
# excludes its inland edge, so lng -16.5 or lat 12.5 is still land.
DEFAULT_IMPLAUSIBLE_ZONES = [
    ImplausibleZone(10.5, 12.7, -16.8, -16.5, OCEAN_REASON, frozenset({"max_lng"})),
    ImplausibleZone(10.5, 12.7, -13.8, -13.6, OCEAN_REASON, frozenset({"min_lng"})),
    ImplausibleZone(10.5, 10.8, -16.8, -13.6, OCEAN_REASON, frozenset({"max_lat"})),
    ImplausibleZone(12.5, 12.7, -16.8, -13.6, OCEAN_REASON, frozenset({"min_lat"})),
    ImplausibleZone(11.0, 11.5, -15.8, -15.2, UNINHABITED_REASON),
]


class GeoValidationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    GEO_COUNTRY_NAME: str = "Guinea-Bissau"
    GEO_COUNTRY_BOUNDS: BoundingBox = DEFAULT_COUNTRY_BOUNDS
    GEO_IMPLAUSIBLE_ZONES: list[ImplausibleZone] = DEFAULT_IMPLAUSIBLE_ZONES

    # Inclusive upper bounds in metres for EXCELLENT, GOOD, FAIR, POOR
    GEO_ACCURACY_THRESHOLDS: tuple[float, float, float, float] = (
        10.0,
        25.0,
        50.0,
        100.0,
    )
    GEO_REGION_CONSISTENCY_THRESHOLD_M: float = Field(default=50_000.0, gt=0)

    GEO_CLUSTER_RADIUS_M: float = Field(default=1_000.0, gt=0)
    GEO_CLUSTER_MODE: Literal["seed", "connected"] = "seed"

    # Above this many points the O(n^2) steps log a warning
    GEO_PAIRWISE_WARN_THRESHOLD: int = Field(default=5_000, ge=2)

    @field_validator("GEO_ACCURACY_THRESHOLDS")
    @classmethod
    def _thresholds_ascending(
        cls, value: tuple[float, float, float, float]
    ) -> tuple[float, float, float, float]:
        if any(v <= 0 for v in value):
            raise ValueError("accuracy thresholds must be positive")
        if any(a >= b for a, b in zip(value, value[1:])):
            raise ValueError("accuracy thresholds must be strictly ascending")
        return value


__all__ = ["GeoValidationSettings", "DEFAULT_COUNTRY_BOUNDS", "DEFAULT_IMPLAUSIBLE_ZONES"]
