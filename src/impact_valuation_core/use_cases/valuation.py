"""
ROI Valuation

Aggregates the cost and effect entries of one project into ROI metrics:
total cost, total monetary value, economic and qualitative ROI, payback
period and summary counts.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from impact_valuation_core.cost_calc import total_cost as sum_costs
from impact_valuation_core.domain.entities import EffectEntry
from impact_valuation_core.domain.value_objects import (
    CombinedROI,
    DimensionBreakdown,
    EffectValuation,
    NormalizedValue,
    ROIMetrics,
    ROISummary,
)
from impact_valuation_core.effect_calc import (
    normalize_financial,
    normalize_redistribution,
    qualitative_ratio,
)
from impact_valuation_core.engine_config import EngineConfig, load_config
from impact_valuation_core.entry_parser import (
    as_list,
    as_mapping,
    parse_cost_entries,
    parse_effect_entries,
    to_number,
)

logger = logging.getLogger(__name__)


def calculate_economic_roi(total_cost: float, total_value: float) -> float:
    """
    Economic ROI = (monetary benefit - cost) / cost

    Returns:
        ROI as a ratio (1.3 == 130%). Returns 0 if cost is 0.
    """
    if total_cost <= 0:
        return 0.0
    return (total_value - total_cost) / total_cost


def calculate_payback_period(total_cost: float, total_value: float) -> float:
    """
    Payback period = cost / (monetary value / 12)

    The total monetary value is treated as a yearly figure and divided into
    its monthly equivalent.

    Returns:
        Payback period. Returns 0 if cost or value is not positive.
    """
    if total_cost <= 0 or total_value <= 0:
        return 0.0
    return total_cost / (total_value / 12)


def _entries(value: Any) -> Any:
    if value is None or isinstance(value, (list, str)):
        return value
    return list(value)


def _resolve_total_cost(cost_entries: list, budget_amount: Any) -> float:
    if cost_entries:
        return sum_costs(cost_entries)
    # Idea-phase projects may only carry a budget estimate
    return max(0.0, to_number(budget_amount))


def compute_roi(
    effect_entries: Iterable[Any] | None,
    cost_entries: Iterable[Any] | None,
    budget_amount: Any = None,
    config: EngineConfig | None = None,
) -> ROIMetrics:
    """
    Calculate ROI metrics for one project

    Args:
        effect_entries: Raw or parsed effect entries
        cost_entries: Raw or parsed cost entries
        budget_amount: Budget estimate, used as total cost when there are no
            cost entries
        config: EngineConfig (loads from env if not provided)

    Returns:
        ROIMetrics. All zero when no effect entry contributes anything.
    """
    if config is None:
        config = load_config()

    effects = parse_effect_entries(_entries(effect_entries))
    costs = parse_cost_entries(_entries(cost_entries))
    cost = _resolve_total_cost(costs, budget_amount)

    total_value = 0.0
    financial_count = 0
    redistribution_count = 0
    ratios: list[float] = []
    contributing = 0
    dimensions: set[str] = set()
    lines: list[EffectValuation] = []
    breakdown: dict[str, DimensionBreakdown] = {}

    for effect in effects:
        entry_lines = _value_effect(effect, config)
        if not entry_lines:
            continue

        contributing += 1
        dimensions.add(effect.value_dimension)
        dimension = breakdown.setdefault(effect.value_dimension, DimensionBreakdown())
        dimension.effect_count += 1

        for line in entry_lines:
            if line.kind == "qualitative":
                ratios.append(line.improvement)
                continue
            if line.kind == "financial":
                financial_count += 1
            else:
                redistribution_count += 1
            total_value += line.value
            dimension.total_value += line.value
            line.roi = line.value / cost if cost > 0 else 0.0
        lines.extend(entry_lines)

    if contributing == 0:
        logger.debug("No contributing effect entries, returning empty metrics")
        return ROIMetrics.empty()

    economic_roi = calculate_economic_roi(cost, total_value)
    qualitative_roi = sum(ratios) / len(ratios) if ratios else 0.0

    return ROIMetrics(
        total_cost=cost,
        total_monetary_value=total_value,
        economic_roi=economic_roi,
        qualitative_roi=qualitative_roi,
        combined_roi=CombinedROI(economic=economic_roi, qualitative=qualitative_roi),
        payback_period_years=calculate_payback_period(cost, total_value),
        summary=ROISummary(
            total_effects=contributing,
            financial_count=financial_count,
            redistribution_count=redistribution_count,
            qualitative_count=len(ratios),
            dimensions_covered=frozenset(dimensions),
        ),
        effects=lines,
        dimension_breakdown=breakdown,
    )


def _value_effect(effect: EffectEntry, config: EngineConfig) -> list[EffectValuation]:
    """Valuation lines contributed by one effect entry (empty if none)."""
    lines: list[EffectValuation] = []

    if effect.has_quantitative and effect.quantitative is not None:
        financial = effect.quantitative.financial
        normalized: NormalizedValue | None = normalize_financial(financial, config)
        if normalized is not None:
            lines.append(EffectValuation(
                dimension=effect.value_dimension,
                kind="financial",
                label=financial.measurement_name,
                value=normalized.value,
                description=normalized.description,
            ))

        redistribution = effect.quantitative.redistribution
        normalized = normalize_redistribution(redistribution, config)
        if normalized is not None:
            lines.append(EffectValuation(
                dimension=effect.value_dimension,
                kind="redistribution",
                label=redistribution.resource_type,
                value=normalized.value,
                description=normalized.description,
            ))

    if effect.has_qualitative and effect.qualitative is not None:
        ratio = qualitative_ratio(effect.qualitative)
        if ratio is not None:
            qual = effect.qualitative
            lines.append(EffectValuation(
                dimension=effect.value_dimension,
                kind="qualitative",
                label=qual.factor,
                value=0.0,
                description=f"{qual.current_rating:g} → {qual.target_rating:g} ({ratio:+.0%})",
                improvement=ratio,
            ))

    return lines


def compute_project_roi(project: Any, config: EngineConfig | None = None) -> ROIMetrics:
    """
    Calculate ROI metrics straight from a raw project record

    Reads cost_data.actualCostDetails.costEntries, cost_data.budgetDetails.budgetAmount
    and effects_data.effectDetails.

    Args:
        project: Raw project record
        config: EngineConfig (loads from env if not provided)

    Returns:
        ROIMetrics
    """
    project = as_mapping(project)
    cost_data = as_mapping(project.get("cost_data"))
    effects_data = as_mapping(project.get("effects_data"))

    return compute_roi(
        as_list(effects_data.get("effectDetails")),
        as_list(as_mapping(cost_data.get("actualCostDetails")).get("costEntries")),
        budget_amount=as_mapping(cost_data.get("budgetDetails")).get("budgetAmount"),
        config=config,
    )
