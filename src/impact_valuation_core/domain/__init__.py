"""
Domain Layer

Defines constants, entities, and value objects that form the core of the valuation logic.
Has no dependencies on external libraries.
"""

from impact_valuation_core.domain.constants import (
    MONTHS_PER_YEAR,
    SCORE_CATEGORIES,
    SCORE_LEVELS,
    TOP_SCORE_LEVEL,
    WORK_DAYS_PER_YEAR,
    WORK_WEEKS_PER_YEAR,
)
from impact_valuation_core.domain.entities import (
    CostEntry,
    CostUnit,
    EffectEntry,
    EffectType,
    FinancialDetails,
    QualitativeDetails,
    QuantitativeDetails,
    RedistributionDetails,
    Timescale,
    ValueUnit,
)
from impact_valuation_core.domain.value_objects import (
    CategoryScore,
    CombinedROI,
    NormalizedValue,
    ProjectScore,
    ROIInsights,
    ROIMetrics,
    ROISummary,
)

__all__ = [
    # constants
    "MONTHS_PER_YEAR",
    "SCORE_CATEGORIES",
    "SCORE_LEVELS",
    "TOP_SCORE_LEVEL",
    "WORK_DAYS_PER_YEAR",
    "WORK_WEEKS_PER_YEAR",
    # entities
    "CostEntry",
    "CostUnit",
    "EffectEntry",
    "EffectType",
    "FinancialDetails",
    "QualitativeDetails",
    "QuantitativeDetails",
    "RedistributionDetails",
    "Timescale",
    "ValueUnit",
    # value objects
    "CategoryScore",
    "CombinedROI",
    "NormalizedValue",
    "ProjectScore",
    "ROIInsights",
    "ROIMetrics",
    "ROISummary",
]
