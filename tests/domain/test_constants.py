"""Tests for domain constants"""

from impact_valuation_core.domain.constants import (
    MONTHS_PER_YEAR,
    SCORE_CATEGORIES,
    SCORE_LEVELS,
    TOP_SCORE_LEVEL,
    WORK_DAYS_PER_YEAR,
    WORK_WEEKS_PER_YEAR,
)


def test_work_calendar():
    """The work calendar is 235 days, 47 weeks and 12 months"""
    assert WORK_DAYS_PER_YEAR == 235
    assert WORK_WEEKS_PER_YEAR == 47
    assert MONTHS_PER_YEAR == 12


def test_score_categories_sum_to_100():
    assert sum(max_points for max_points, _ in SCORE_CATEGORIES.values()) == 100


def test_score_category_maxima():
    assert {key: max_points for key, (max_points, _) in SCORE_CATEGORIES.items()} == {
        "basic": 15,
        "financial": 25,
        "effects": 35,
        "technical": 15,
        "governance": 10,
    }


def test_score_levels_ascending():
    """Level thresholds are strictly ascending and below 100"""
    thresholds = [upper for upper, _ in SCORE_LEVELS]
    assert thresholds == sorted(thresholds)
    assert len(set(thresholds)) == len(thresholds)
    assert thresholds[-1] <= 100
    assert TOP_SCORE_LEVEL not in [level for _, level in SCORE_LEVELS]
