"""Quality score combining the independent validation checks."""

from collections.abc import Mapping

from src.modules.geo.models import AccuracyLevel, Plausibility, RegionConsistency

MAX_SCORE = 100.0

ACCURACY_DEDUCTIONS: dict[AccuracyLevel, float] = {
    AccuracyLevel.EXCELLENT: 0.0,
    AccuracyLevel.GOOD: 10.0,
    AccuracyLevel.FAIR: 25.0,
    AccuracyLevel.POOR: 50.0,
    AccuracyLevel.INVALID: 80.0,
    AccuracyLevel.UNKNOWN: 30.0,
}
REGION_INCONSISTENT_DEDUCTION = 20.0
IMPLAUSIBLE_DEDUCTION = 30.0


class QualityScorer:
    """Scores a coordinate from 100 down to 0 with fixed additive deductions."""

    def __init__(
        self,
        accuracy_deductions: Mapping[AccuracyLevel, float] = ACCURACY_DEDUCTIONS,
        region_inconsistent_deduction: float = REGION_INCONSISTENT_DEDUCTION,
        implausible_deduction: float = IMPLAUSIBLE_DEDUCTION,
    ):
        missing = set(AccuracyLevel) - set(accuracy_deductions)
        if missing:
            raise ValueError(
                f"missing deductions for: {', '.join(sorted(m.value for m in missing))}"
            )
        self.accuracy_deductions = dict(accuracy_deductions)
        self.region_inconsistent_deduction = region_inconsistent_deduction
        self.implausible_deduction = implausible_deduction

    def score(
        self,
        accuracy_level: AccuracyLevel,
        region_consistency: RegionConsistency | None = None,
        plausibility: Plausibility | None = None,
    ) -> float:
        total = self.accuracy_deductions[accuracy_level]
        if region_consistency is not None and not region_consistency.consistent:
            total += self.region_inconsistent_deduction
        if plausibility is not None and not plausibility.plausible:
            total += self.implausible_deduction
        return round(max(0.0, MAX_SCORE - total), 1)
