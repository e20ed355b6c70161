"""
Scoring sub-package

Provides project data completeness scoring.
"""

from impact_valuation_core.domain.value_objects import CategoryScore, ProjectScore
from impact_valuation_core.scoring.completeness import completeness_level, score_project

__all__ = [
    # value objects (re-exported from domain)
    "CategoryScore",
    "ProjectScore",
    # completeness
    "completeness_level",
    "score_project",
]
