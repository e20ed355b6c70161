"""
Project Completeness Scoring

Scores how much of the optional project data model has been filled in, across
five weighted categories, and lists the high-value information that is
missing. Used to nudge project owners towards richer project records.

Reads the raw project record (snake_case top-level groups, camelCase
form data inside them) and never raises for malformed data.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from impact_valuation_core.domain.constants import (
    MISSING_BUDGET,
    MISSING_COST_BREAKDOWN,
    MISSING_EFFECT_DETAILS,
    MISSING_EFFECTS,
    MISSING_LEADERSHIP,
    MISSING_LEGAL,
    MISSING_TECHNICAL,
    SCORE_CATEGORIES,
    SCORE_LEVELS,
    TOP_SCORE_LEVEL,
)
from impact_valuation_core.domain.entities import CostUnit, ValueUnit
from impact_valuation_core.domain.value_objects import CategoryScore, ProjectScore
from impact_valuation_core.entry_parser import as_list, as_mapping, to_flag, to_number

_VALUE_UNITS = {unit.value for unit in ValueUnit}


def _filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _positive(group: Mapping, *keys: str) -> bool:
    return all(to_number(group.get(key)) > 0 for key in keys)


def _given(group: Mapping, *keys: str) -> bool:
    """All keys hold a number (zero included)."""
    return all(not math.isnan(to_number(group.get(key), default=math.nan)) for key in keys)


def _valid_rating(value: Any) -> bool:
    return 1 <= to_number(value) <= 10


def completeness_level(percentage: int) -> str:
    """
    Completeness level for a percentage

    <50 Grundläggande, <70 Utvecklad, <85 Avancerad, <95 Komplett, else Exemplarisk
    """
    for upper, level in SCORE_LEVELS:
        if percentage < upper:
            return level
    return TOP_SCORE_LEVEL


# --- Basic information ---


def _score_basic(project: Mapping) -> int:
    score = 0
    for key in ("title", "intro", "problem", "opportunity", "responsible"):
        if _filled(project.get(key)):
            score += 2
    if as_list(project.get("areas")):
        score += 1
    if as_list(project.get("value_dimensions")):
        score += 1
    if as_list(project.get("municipality_ids")) or as_list(project.get("county_codes")):
        score += 1
    # Extra points for very complete basic info
    if score >= 10:
        score += 2
    return score


# --- Financial data ---


def _detailed_cost_entry(entry: Any) -> bool:
    entry = as_mapping(entry)
    unit = entry.get("costUnit")
    if unit == CostUnit.HOURS.value:
        return _positive(as_mapping(entry.get("hoursDetails")), "hours", "hourlyRate")
    if unit == CostUnit.FIXED.value:
        return _positive(as_mapping(entry.get("fixedDetails")), "fixedAmount")
    if unit == CostUnit.MONTHLY.value:
        return _positive(as_mapping(entry.get("monthlyDetails")), "monthlyAmount")
    if unit == CostUnit.YEARLY.value:
        return _positive(as_mapping(entry.get("yearlyDetails")), "yearlyAmount")
    return False


def _score_financial(project: Mapping, missing: list[str]) -> int:
    cost_data = as_mapping(project.get("cost_data"))
    budget_details = as_mapping(cost_data.get("budgetDetails"))
    has_budget_amount = _positive(budget_details, "budgetAmount")

    score = 0
    budget_answered = "hasDedicatedBudget" in cost_data or has_budget_amount
    if budget_answered:
        score += 4
        if has_budget_amount:
            score += 5
    else:
        missing.append(MISSING_BUDGET)

    entries = as_list(as_mapping(cost_data.get("actualCostDetails")).get("costEntries"))
    if entries:
        detailed = sum(1 for entry in entries if _detailed_cost_entry(entry))
        score += 6
        score += min(6, len(entries) * 2)
        score += min(4, detailed * 2)
    elif budget_answered:
        missing.append(MISSING_COST_BREAKDOWN)

    return score


# --- Effects ---


def _unit_group(details: Mapping) -> tuple[str | None, dict]:
    unit = details.get("valueUnit")
    if not isinstance(unit, str) or unit not in _VALUE_UNITS:
        return None, {}
    return unit, as_mapping(details.get(f"{unit}Details"))


def _financial_complete(details: Mapping) -> bool:
    unit, group = _unit_group(details)
    return (
        _filled(details.get("measurementName"))
        and unit is not None
        and bool(group)
        and to_number(details.get("annualizationYears")) >= 1
    )


def _financial_detailed(details: Mapping) -> bool:
    unit, group = _unit_group(details)
    if unit == ValueUnit.HOURS.value:
        return _positive(group, "hourlyRate") and (
            _positive(group, "affectedPeople", "timePerPerson") or _positive(group, "hours")
        )
    if unit == ValueUnit.CURRENCY.value:
        return _positive(group, "amount")
    if unit == ValueUnit.PERCENTAGE.value:
        return _positive(group, "percentage", "baseValue")
    if unit == ValueUnit.COUNT.value:
        return _positive(group, "count", "valuePerUnit")
    if unit == ValueUnit.OTHER.value:
        return _positive(group, "amount", "valuePerUnit")
    return False


def _redistribution_complete(details: Mapping) -> bool:
    unit, group = _unit_group(details)
    return (
        _filled(details.get("resourceType"))
        and unit is not None
        and bool(group)
        and to_number(details.get("annualizationYears")) >= 1
    )


def _redistribution_detailed(details: Mapping) -> bool:
    unit, group = _unit_group(details)
    if unit == ValueUnit.HOURS.value:
        return _positive(group, "hourlyRate") and (
            (_positive(group, "affectedPeople") and _given(group, "currentTimePerPerson", "newTimePerPerson"))
            or _given(group, "currentHours", "newHours")
        )
    if unit == ValueUnit.CURRENCY.value:
        return _given(group, "currentAmount", "newAmount")
    if unit == ValueUnit.PERCENTAGE.value:
        return _given(group, "currentPercentage", "newPercentage") and _positive(group, "baseValue")
    if unit == ValueUnit.COUNT.value:
        return _given(group, "currentCount", "newCount") and _positive(group, "valuePerUnit")
    if unit == ValueUnit.OTHER.value:
        return _given(group, "currentAmount", "newAmount") and _positive(group, "valuePerUnit")
    return False


def _qualitative_complete(details: Mapping) -> bool:
    return (
        _filled(details.get("factor"))
        and _valid_rating(details.get("currentRating"))
        and _valid_rating(details.get("targetRating"))
        and to_number(details.get("annualizationYears")) >= 1
    )


def _score_effects(project: Mapping, missing: list[str]) -> int:
    effects_data = as_mapping(project.get("effects_data"))
    entries = as_list(effects_data.get("effectDetails"))
    if not entries:
        missing.append(MISSING_EFFECTS)
        return 0

    quantitative = 0
    qualitative = 0
    monetary = 0
    has_complete_effect = False

    for raw in entries:
        effect = as_mapping(raw)
        if to_flag(effect.get("hasQuantitative")):
            quant = as_mapping(effect.get("quantitativeDetails"))
            financial = as_mapping(quant.get("financialDetails"))
            if _financial_complete(financial):
                quantitative += 1
                has_complete_effect = True
                if _financial_detailed(financial):
                    monetary += 1
            redistribution = as_mapping(quant.get("redistributionDetails"))
            if _redistribution_complete(redistribution):
                quantitative += 1
                has_complete_effect = True
                if _redistribution_detailed(redistribution):
                    monetary += 1
        if to_flag(effect.get("hasQualitative")):
            if _qualitative_complete(as_mapping(effect.get("qualitativeDetails"))):
                qualitative += 1
                has_complete_effect = True

    # Partial, dangling entries earn nothing
    if not has_complete_effect:
        missing.append(MISSING_EFFECT_DETAILS)
        return 0

    score = 16
    score += min(8, quantitative * 4)
    score += min(6, qualitative * 3)
    score += min(3, monetary)
    if quantitative and qualitative:
        score += 2
    return score


# --- Technical data ---


def _score_technical(project: Mapping, missing: list[str]) -> int:
    tech = as_mapping(project.get("technical_data"))

    score = 0
    if _filled(tech.get("system_name")):
        score += 3
    if _filled(tech.get("ai_methodology")):
        score += 3
    if _filled(tech.get("deployment_environment")):
        score += 2
    if as_list(tech.get("data_types")):
        score += 2
    if as_list(tech.get("data_sources")):
        score += 2
    if tech:
        score += 1
    if score >= 10:
        score += 2
    if _filled(tech.get("technical_obstacles")) or _filled(tech.get("technical_solutions")):
        score += 2

    if not (_filled(tech.get("system_name")) or _filled(tech.get("ai_methodology"))):
        missing.append(MISSING_TECHNICAL)
    return score


# --- Governance ---


def _score_governance(project: Mapping, missing: list[str]) -> int:
    score = 0
    if as_mapping(project.get("leadership_data")):
        score += 5
    else:
        missing.append(MISSING_LEADERSHIP)
    if as_mapping(project.get("legal_data")):
        score += 5
    else:
        missing.append(MISSING_LEGAL)
    return score


def score_project(project: Any) -> ProjectScore:
    """
    Calculate the completeness score of a project

    Categories (max points): basic 15, financial 25, effects 35, technical 15,
    governance 10. Each category is capped at its max.

    Args:
        project: Raw project record

    Returns:
        ProjectScore
    """
    project = as_mapping(project)
    missing: list[str] = []

    raw_scores = {
        "basic": _score_basic(project),
        "financial": _score_financial(project, missing),
        "effects": _score_effects(project, missing),
        "technical": _score_technical(project, missing),
        "governance": _score_governance(project, missing),
    }

    breakdown = {
        key: CategoryScore(score=min(max_points, raw_scores[key]), max=max_points, label=label)
        for key, (max_points, label) in SCORE_CATEGORIES.items()
    }
    total_score = sum(category.score for category in breakdown.values())
    max_score = sum(category.max for category in breakdown.values())
    # Round half up
    percentage = min(100, math.floor(100 * total_score / max_score + 0.5))

    return ProjectScore(
        total_score=total_score,
        max_score=max_score,
        percentage=percentage,
        breakdown=breakdown,
        level=completeness_level(percentage),
        missing_high_value=missing,
    )
