"""
Use Cases Layer

Aggregates business logic and provides use cases called from the runner.
"""

from impact_valuation_core.use_cases.valuation import (
    calculate_economic_roi,
    calculate_payback_period,
    compute_roi,
    compute_project_roi,
)
from impact_valuation_core.use_cases.insights import roi_insights
from impact_valuation_core.use_cases.portfolio import (
    SUMMARY_COLUMNS,
    ProjectEvaluation,
    evaluate_project,
    evaluate_portfolio,
)

__all__ = [
    # valuation
    "calculate_economic_roi",
    "calculate_payback_period",
    "compute_roi",
    "compute_project_roi",
    # insights
    "roi_insights",
    # portfolio
    "SUMMARY_COLUMNS",
    "ProjectEvaluation",
    "evaluate_project",
    "evaluate_portfolio",
]
