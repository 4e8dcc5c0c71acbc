"""Tests for the quality score."""

import pytest

from src.modules.geo.models import AccuracyLevel, Plausibility, RegionConsistency
from src.modules.geo.scoring import ACCURACY_DEDUCTIONS, QualityScorer

CONSISTENT = RegionConsistency(consistent=True, reason="ok")
INCONSISTENT = RegionConsistency(consistent=False, reason="too far")
PLAUSIBLE = Plausibility(plausible=True, reason="ok")
IMPLAUSIBLE = Plausibility(plausible=False, reason="ocean")

# Best to worst
ACCURACY_ORDER = [
    AccuracyLevel.EXCELLENT,
    AccuracyLevel.GOOD,
    AccuracyLevel.FAIR,
    AccuracyLevel.POOR,
    AccuracyLevel.INVALID,
]


@pytest.fixture
def scorer() -> QualityScorer:
    return QualityScorer()


@pytest.mark.parametrize(
    "level, expected",
    [
        (AccuracyLevel.EXCELLENT, 100.0),
        (AccuracyLevel.GOOD, 90.0),
        (AccuracyLevel.FAIR, 75.0),
        (AccuracyLevel.POOR, 50.0),
        (AccuracyLevel.INVALID, 20.0),
        (AccuracyLevel.UNKNOWN, 70.0),
    ],
)
def test_accuracy_deductions(scorer, level, expected):
    assert scorer.score(level, CONSISTENT, PLAUSIBLE) == expected


def test_region_inconsistency(scorer):
    assert scorer.score(AccuracyLevel.EXCELLENT, INCONSISTENT, PLAUSIBLE) == 80.0


def test_implausible(scorer):
    assert scorer.score(AccuracyLevel.EXCELLENT, CONSISTENT, IMPLAUSIBLE) == 70.0


def test_deductions_add_up(scorer):
    assert scorer.score(AccuracyLevel.FAIR, INCONSISTENT, IMPLAUSIBLE) == 25.0


def test_floor_at_zero(scorer):
    assert scorer.score(AccuracyLevel.INVALID, INCONSISTENT, IMPLAUSIBLE) == 0.0


def test_unchecked_conditions_do_not_deduct(scorer):
    assert scorer.score(AccuracyLevel.EXCELLENT) == 100.0


@pytest.mark.parametrize("consistency", [CONSISTENT, INCONSISTENT])
@pytest.mark.parametrize("plausibility", [PLAUSIBLE, IMPLAUSIBLE])
def test_worse_accuracy_never_scores_higher(scorer, consistency, plausibility):
    scores = [scorer.score(level, consistency, plausibility) for level in ACCURACY_ORDER]
    assert scores == sorted(scores, reverse=True)


def test_rounded_to_one_decimal():
    deductions = dict(ACCURACY_DEDUCTIONS)
    deductions[AccuracyLevel.GOOD] = 12.34
    assert QualityScorer(deductions).score(AccuracyLevel.GOOD) == 87.7


def test_missing_deduction_rejected():
    deductions = dict(ACCURACY_DEDUCTIONS)
    del deductions[AccuracyLevel.UNKNOWN]
    with pytest.raises(ValueError):
        QualityScorer(deductions)
