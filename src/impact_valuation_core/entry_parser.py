"""
Entry Parser

Converts the raw cost and effect entries stored on a project record (camelCase
JSON objects from the project form) into typed domain entities.

Parsing never raises: absent groups become None, unknown discriminators become
inert values, and malformed numbers are coerced to their default.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Mapping

from impact_valuation_core.domain.constants import CUSTOM_VALUE_DIMENSION
from impact_valuation_core.domain.entities import (
    CostEntry,
    CostUnit,
    CountGain,
    CountShift,
    CurrencyGain,
    CurrencyShift,
    EffectEntry,
    EffectType,
    FinancialDetails,
    FixedCost,
    HoursCost,
    HoursGain,
    HoursShift,
    MonthlyCost,
    OtherGain,
    OtherShift,
    PercentageGain,
    PercentageShift,
    QualitativeDetails,
    QuantitativeDetails,
    RedistributionDetails,
    Timescale,
    UnrecognizedCost,
    ValueUnit,
    YearlyCost,
)

logger = logging.getLogger(__name__)


def to_number(value: Any, default: float = 0.0) -> float:
    """
    Numeric-or-default parsing

    Accepts ints, floats and numeric strings (a decimal comma and spaces used as
    thousands separators are tolerated). Anything else, including booleans,
    NaN and infinities, yields the default.

    Args:
        value: Raw value
        default: Value returned when parsing fails

    Returns:
        float
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    elif isinstance(value, str):
        text = value.strip().replace("\u00a0", "").replace(" ", "").replace(",", ".")
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(number):
        return default
    return number


def to_flag(value: Any) -> bool:
    """Form flags arrive as booleans or as the strings "true"/"false"."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


def to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def as_mapping(value: Any) -> dict:
    """
    Return a nested group as a dict

    JSON columns sometimes arrive still encoded as strings; those are decoded.
    Anything that is not (or does not decode to) an object becomes an empty dict.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, str) and value.strip():
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable JSON group: %.60s", value)
            return {}
        if isinstance(decoded, Mapping):
            return dict(decoded)
    return {}


def as_list(value: Any) -> list:
    """Return a list-valued field as a list (JSON strings are decoded)"""
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip():
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable JSON list: %.60s", value)
            return []
        if isinstance(decoded, list):
            return decoded
    return []


def parse_timescale(value: Any) -> Timescale | None:
    try:
        return Timescale(value)
    except ValueError:
        return None


def _duration(value: Any) -> float:
    # Absent, zero or malformed durations count as a single period
    return to_number(value) or 1.0


def _annualization_years(value: Any) -> float:
    return max(1.0, to_number(value, 1.0))


# --- Cost entries ---


def parse_cost_entry(data: Any) -> CostEntry:
    """
    Create a typed cost entry from a raw cost entry

    Args:
        data: Raw cost entry ({"costUnit": ..., "hoursDetails": {...}, ...})

    Returns:
        CostEntry: One of HoursCost, FixedCost, MonthlyCost, YearlyCost or
        UnrecognizedCost
    """
    data = as_mapping(data)
    label = to_text(data.get("costLabel"))
    unit = data.get("costUnit")

    if unit == CostUnit.HOURS.value:
        details = as_mapping(data.get("hoursDetails"))
        return HoursCost(
            hours=to_number(details.get("hours")),
            hourly_rate=to_number(details.get("hourlyRate")),
            label=label,
        )
    if unit == CostUnit.FIXED.value:
        details = as_mapping(data.get("fixedDetails"))
        return FixedCost(fixed_amount=to_number(details.get("fixedAmount")), label=label)
    if unit == CostUnit.MONTHLY.value:
        details = as_mapping(data.get("monthlyDetails"))
        return MonthlyCost(
            monthly_amount=to_number(details.get("monthlyAmount")),
            monthly_duration=_duration(details.get("monthlyDuration")),
            label=label,
        )
    if unit == CostUnit.YEARLY.value:
        details = as_mapping(data.get("yearlyDetails"))
        return YearlyCost(
            yearly_amount=to_number(details.get("yearlyAmount")),
            yearly_duration=_duration(details.get("yearlyDuration")),
            label=label,
        )

    logger.debug("Unrecognized costUnit %r, entry ignored", unit)
    return UnrecognizedCost(cost_unit=None if unit is None else str(unit), label=label)


# --- Financial details ---


def _parse_gain(unit: ValueUnit, group: dict):
    timescale = parse_timescale(group.get("timescale"))
    if unit is ValueUnit.HOURS:
        return HoursGain(
            affected_people=to_number(group.get("affectedPeople")),
            time_per_person=to_number(group.get("timePerPerson")),
            hourly_rate=to_number(group.get("hourlyRate")),
            hours=to_number(group.get("hours")),
            timescale=timescale,
        )
    if unit is ValueUnit.CURRENCY:
        return CurrencyGain(amount=to_number(group.get("amount")), timescale=timescale)
    if unit is ValueUnit.PERCENTAGE:
        return PercentageGain(
            percentage=to_number(group.get("percentage")),
            base_value=to_number(group.get("baseValue")),
            timescale=timescale,
        )
    if unit is ValueUnit.COUNT:
        return CountGain(
            count=to_number(group.get("count")),
            value_per_unit=to_number(group.get("valuePerUnit")),
            timescale=timescale,
        )
    return OtherGain(
        amount=to_number(group.get("amount")),
        value_per_unit=to_number(group.get("valuePerUnit")),
        custom_unit=to_text(group.get("customUnit")),
        timescale=timescale,
    )


def _parse_shift(unit: ValueUnit, group: dict):
    timescale = parse_timescale(group.get("timescale"))
    if unit is ValueUnit.HOURS:
        return HoursShift(
            affected_people=to_number(group.get("affectedPeople")),
            current_time_per_person=to_number(group.get("currentTimePerPerson")),
            new_time_per_person=to_number(group.get("newTimePerPerson")),
            hourly_rate=to_number(group.get("hourlyRate")),
            current_hours=to_number(group.get("currentHours")),
            new_hours=to_number(group.get("newHours")),
            timescale=timescale,
        )
    if unit is ValueUnit.CURRENCY:
        return CurrencyShift(
            current_amount=to_number(group.get("currentAmount")),
            new_amount=to_number(group.get("newAmount")),
            timescale=timescale,
        )
    if unit is ValueUnit.PERCENTAGE:
        return PercentageShift(
            current_percentage=to_number(group.get("currentPercentage")),
            new_percentage=to_number(group.get("newPercentage")),
            base_value=to_number(group.get("baseValue")),
            timescale=timescale,
        )
    if unit is ValueUnit.COUNT:
        return CountShift(
            current_count=to_number(group.get("currentCount")),
            new_count=to_number(group.get("newCount")),
            value_per_unit=to_number(group.get("valuePerUnit")),
            timescale=timescale,
        )
    return OtherShift(
        current_amount=to_number(group.get("currentAmount")),
        new_amount=to_number(group.get("newAmount")),
        value_per_unit=to_number(group.get("valuePerUnit")),
        custom_unit=to_text(group.get("customUnit")),
        timescale=timescale,
    )


def _parse_value_unit(value: Any) -> ValueUnit | None:
    try:
        return ValueUnit(value)
    except ValueError:
        logger.debug("Unrecognized valueUnit %r", value)
        return None


def _detail_group(data: dict, unit: ValueUnit | None) -> dict:
    if unit is None:
        return {}
    return as_mapping(data.get(f"{unit.value}Details"))


def parse_financial_details(data: Any) -> FinancialDetails | None:
    """
    Create FinancialDetails from a raw financialDetails object

    Args:
        data: Raw financialDetails

    Returns:
        FinancialDetails, or None when the group is absent or empty
    """
    data = as_mapping(data)
    if not data:
        return None
    unit = _parse_value_unit(data.get("valueUnit"))
    group = _detail_group(data, unit)
    return FinancialDetails(
        measurement_name=to_text(data.get("measurementName")),
        value_unit=unit,
        detail=_parse_gain(unit, group) if group else None,
        annualization_years=_annualization_years(data.get("annualizationYears")),
    )


def parse_redistribution_details(data: Any) -> RedistributionDetails | None:
    """
    Create RedistributionDetails from a raw redistributionDetails object

    Args:
        data: Raw redistributionDetails

    Returns:
        RedistributionDetails, or None when the group is absent or empty
    """
    data = as_mapping(data)
    if not data:
        return None
    unit = _parse_value_unit(data.get("valueUnit"))
    group = _detail_group(data, unit)
    return RedistributionDetails(
        resource_type=to_text(data.get("resourceType")),
        value_unit=unit,
        detail=_parse_shift(unit, group) if group else None,
        annualization_years=_annualization_years(data.get("annualizationYears")),
    )


def parse_qualitative_details(data: Any) -> QualitativeDetails | None:
    data = as_mapping(data)
    if not data:
        return None
    return QualitativeDetails(
        factor=to_text(data.get("factor")),
        current_rating=to_number(data.get("currentRating")),
        target_rating=to_number(data.get("targetRating")),
        annualization_years=_annualization_years(data.get("annualizationYears")),
    )


def _parse_quantitative_details(data: Any) -> QuantitativeDetails | None:
    data = as_mapping(data)
    if not data:
        return None
    try:
        effect_type = EffectType(data.get("effectType"))
    except ValueError:
        effect_type = None
    return QuantitativeDetails(
        effect_type=effect_type,
        financial=parse_financial_details(data.get("financialDetails")),
        redistribution=parse_redistribution_details(data.get("redistributionDetails")),
    )


def value_dimension_label(data: Mapping) -> str:
    """Display label of an effect's value dimension"""
    dimension = to_text(data.get("valueDimension"))
    custom = to_text(data.get("customValueDimension"))
    if dimension == CUSTOM_VALUE_DIMENSION and custom:
        return custom
    return dimension


def parse_effect_entry(data: Any) -> EffectEntry:
    """
    Create a typed EffectEntry from a raw effect entry

    Args:
        data: Raw effect entry

    Returns:
        EffectEntry
    """
    data = as_mapping(data)
    return EffectEntry(
        value_dimension=value_dimension_label(data),
        has_qualitative=to_flag(data.get("hasQualitative")),
        has_quantitative=to_flag(data.get("hasQuantitative")),
        qualitative=parse_qualitative_details(data.get("qualitativeDetails")),
        quantitative=_parse_quantitative_details(data.get("quantitativeDetails")),
        comment=to_text(data.get("effectComment")),
    )


def parse_cost_entries(entries: Any) -> list[CostEntry]:
    """Parse a list of raw cost entries, preserving input order"""
    return [
        entry if _is_cost_entity(entry) else parse_cost_entry(entry)
        for entry in as_list(entries)
    ]


def parse_effect_entries(entries: Any) -> list[EffectEntry]:
    """Parse a list of raw effect entries, preserving input order"""
    return [
        entry if isinstance(entry, EffectEntry) else parse_effect_entry(entry)
        for entry in as_list(entries)
    ]


def _is_cost_entity(entry: Any) -> bool:
    return isinstance(entry, (HoursCost, FixedCost, MonthlyCost, YearlyCost, UnrecognizedCost))
