"""
Portfolio Evaluation

Runs valuation, completeness scoring and insights over one project or a whole
portfolio, and flattens the results into a summary table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

import pandas as pd

from impact_valuation_core.cost_calc import describe_cost
from impact_valuation_core.domain.value_objects import (
    NormalizedValue,
    ProjectScore,
    ROIInsights,
    ROIMetrics,
)
from impact_valuation_core.engine_config import EngineConfig, load_config
from impact_valuation_core.entry_parser import as_list, as_mapping, to_text
from impact_valuation_core.scoring.completeness import score_project
from impact_valuation_core.use_cases.insights import roi_insights
from impact_valuation_core.use_cases.valuation import compute_project_roi

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "project_id",
    "title",
    "total_cost",
    "total_monetary_value",
    "economic_roi",
    "qualitative_roi",
    "payback_period_years",
    "total_effects",
    "financial_count",
    "redistribution_count",
    "qualitative_count",
    "total_score",
    "percentage",
    "level",
    "risk_level",
    "missing_high_value",
    "error",
]


@dataclass
class ProjectEvaluation:
    """Everything the engine derives from one project snapshot"""
    project_id: str
    title: str
    metrics: ROIMetrics
    score: ProjectScore
    insights: ROIInsights
    cost_lines: list[NormalizedValue] = field(default_factory=list)

    def to_row(self) -> dict:
        """Flatten into one summary table row"""
        summary = self.metrics.summary
        return {
            "project_id": self.project_id,
            "title": self.title,
            "total_cost": self.metrics.total_cost,
            "total_monetary_value": self.metrics.total_monetary_value,
            "economic_roi": self.metrics.economic_roi,
            "qualitative_roi": self.metrics.qualitative_roi,
            "payback_period_years": self.metrics.payback_period_years,
            "total_effects": summary.total_effects,
            "financial_count": summary.financial_count,
            "redistribution_count": summary.redistribution_count,
            "qualitative_count": summary.qualitative_count,
            "total_score": self.score.total_score,
            "percentage": self.score.percentage,
            "level": self.score.level,
            "risk_level": self.insights.risk_level,
            "missing_high_value": "; ".join(self.score.missing_high_value),
            "error": "",
        }


def evaluate_project(project: Any, config: EngineConfig | None = None) -> ProjectEvaluation:
    """
    Evaluate a single project

    Args:
        project: Raw project record
        config: EngineConfig (loads from env if not provided)

    Returns:
        ProjectEvaluation
    """
    if config is None:
        config = load_config()

    project = as_mapping(project)
    metrics = compute_project_roi(project, config)
    cost_entries = as_list(
        as_mapping(as_mapping(project.get("cost_data")).get("actualCostDetails")).get("costEntries")
    )

    return ProjectEvaluation(
        project_id=to_text(project.get("id")),
        title=to_text(project.get("title")),
        metrics=metrics,
        score=score_project(project),
        insights=roi_insights(metrics),
        cost_lines=[describe_cost(entry) for entry in cost_entries],
    )


def evaluate_portfolio(
    projects: Iterable[Any],
    config: EngineConfig | None = None,
) -> pd.DataFrame:
    """
    Evaluate every project of a portfolio into a summary table

    A project that fails to evaluate gets a row with its error message and
    zeroed figures; the remaining projects are still evaluated.

    Args:
        projects: Raw project records
        config: EngineConfig (loads from env if not provided)

    Returns:
        pd.DataFrame: One row per project, columns as in SUMMARY_COLUMNS
    """
    if config is None:
        config = load_config()

    rows = []
    for index, project in enumerate(projects):
        try:
            rows.append(evaluate_project(project, config).to_row())
        except Exception as e:
            logger.exception("Failed to evaluate project #%d", index)
            raw = project if isinstance(project, dict) else {}
            error_row = {column: 0 for column in SUMMARY_COLUMNS}
            error_row.update({
                "project_id": to_text(raw.get("id")),
                "title": to_text(raw.get("title")),
                "level": "",
                "risk_level": "",
                "missing_high_value": "",
                "error": f"ERROR: {e}",
            })
            rows.append(error_row)

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
