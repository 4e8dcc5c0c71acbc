"""GPS accuracy classification."""

import math

from src.modules.geo.models import AccuracyLevel

DEFAULT_THRESHOLDS = (10.0, 25.0, 50.0, 100.0)

_TIERS = (
    AccuracyLevel.EXCELLENT,
    AccuracyLevel.GOOD,
    AccuracyLevel.FAIR,
    AccuracyLevel.POOR,
)


class AccuracyClassifier:
    """Maps a reported accuracy radius (metres) to an AccuracyLevel.

    Thresholds are inclusive upper bounds for EXCELLENT, GOOD, FAIR and POOR.
    Anything above the last threshold is INVALID, a missing value is UNKNOWN.
    """

    def __init__(self, thresholds: tuple[float, float, float, float] = DEFAULT_THRESHOLDS):
        if len(thresholds) != len(_TIERS):
            raise ValueError(f"expected {len(_TIERS)} thresholds, got {len(thresholds)}")
        self.thresholds = tuple(float(t) for t in thresholds)

    def classify(self, accuracy_m: float | None) -> AccuracyLevel:
        if accuracy_m is None:
            return AccuracyLevel.UNKNOWN
        # a negative or NaN radius is a broken reading, not a precise one
        if math.isnan(accuracy_m) or accuracy_m < 0:
            return AccuracyLevel.INVALID
        for limit, level in zip(self.thresholds, _TIERS):
            if accuracy_m <= limit:
                return level
        return AccuracyLevel.INVALID

    @property
    def fair_limit(self) -> float:
        return self.thresholds[2]

    @property
    def acceptable_limit(self) -> float:
        return self.thresholds[3]
