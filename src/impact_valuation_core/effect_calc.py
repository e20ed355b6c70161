"""
Effect Normalization

Reduces the quantitative part of an effect entry (financial gain or
redistribution, each in one of five value units) to a monetary value in SEK
together with a derivation string, and extracts the improvement ratio of a
qualitative (rating-scale) effect.

Periodic values are converted to yearly figures with a fixed work calendar
(235 work days, 47 work weeks, 12 months), then multiplied by the number of
annualization years.
"""

from __future__ import annotations

from typing import Any, Callable

from impact_valuation_core.domain.entities import (
    CountGain,
    CountShift,
    CurrencyGain,
    CurrencyShift,
    FinancialDetails,
    HoursGain,
    HoursShift,
    OtherGain,
    OtherShift,
    PercentageGain,
    PercentageShift,
    QualitativeDetails,
    RedistributionDetails,
    Timescale,
)
from impact_valuation_core.domain.value_objects import NormalizedValue
from impact_valuation_core.engine_config import CalendarConfig, EngineConfig, load_config
from impact_valuation_core.entry_parser import (
    parse_financial_details,
    parse_qualitative_details,
    parse_redistribution_details,
)

TIMESCALE_LABELS = {
    Timescale.PER_DAY: "/dag",
    Timescale.PER_WEEK: "/vecka",
    Timescale.PER_MONTH: "/månad",
    Timescale.PER_YEAR: "/år",
    Timescale.ONE_TIME: " (engång)",
}


def format_sek(amount: float) -> str:
    """Whole kronor with space as thousands separator, e.g. "1 200 SEK"."""
    return f"{amount:,.0f}".replace(",", " ") + " SEK"


def _timescale_label(timescale: Timescale | None) -> str:
    return TIMESCALE_LABELS.get(timescale, "")


def period_multiplier(timescale: Timescale | None, calendar: CalendarConfig | None = None) -> float:
    """
    Number of periods per year for a timescale

    Args:
        timescale: Timescale of the value (None when not given)
        calendar: Work calendar (defaults to 235 days / 47 weeks / 12 months)

    Returns:
        Multiplier that turns one period's value into a yearly value.
        1 for per_year, one_time and a missing timescale.
    """
    if calendar is None:
        calendar = CalendarConfig()
    multipliers = {
        Timescale.PER_DAY: calendar.work_days_per_year,
        Timescale.PER_WEEK: calendar.work_weeks_per_year,
        Timescale.PER_MONTH: calendar.months_per_year,
    }
    return float(multipliers.get(timescale, 1))


def _annualize(
    value: float,
    description: str,
    years: float,
    timescale: Timescale | None,
    config: EngineConfig,
    *,
    legacy_monthly: bool = True,
) -> tuple[float, str]:
    """Scale a yearly value to the effect's multi-year horizon."""
    if timescale is Timescale.ONE_TIME or years <= 1:
        return value, description
    factor = years
    if (
        legacy_monthly
        and config.annualization.legacy_monthly_multiplier
        and timescale is Timescale.PER_MONTH
    ):
        factor *= config.calendar.months_per_year
    return value * factor, f"{description} under {years:g} år"


# --- Financial gains ---


def _hours_gain(detail: HoursGain, calendar: CalendarConfig) -> tuple[float, str]:
    label = _timescale_label(detail.timescale)
    if detail.affected_people > 0 and detail.time_per_person > 0:
        total_hours = (
            detail.affected_people
            * detail.time_per_person
            * period_multiplier(detail.timescale, calendar)
        )
        basis = f"{detail.affected_people:g} personer × {detail.time_per_person:g} timmar{label}"
    else:
        # Legacy entries only carry a flat number of hours
        total_hours = detail.hours
        basis = f"{detail.hours:g} timmar{label}"
    value = total_hours * detail.hourly_rate
    return value, f"{basis} × {format_sek(detail.hourly_rate)}/timme = {total_hours:.0f} timmar totalt"


def _currency_gain(detail: CurrencyGain, calendar: CalendarConfig) -> tuple[float, str]:
    value = detail.amount * period_multiplier(detail.timescale, calendar)
    return value, f"{format_sek(detail.amount)}{_timescale_label(detail.timescale)}"


def _percentage_gain(detail: PercentageGain, calendar: CalendarConfig) -> tuple[float, str]:
    base = detail.percentage / 100 * detail.base_value
    value = base * period_multiplier(detail.timescale, calendar)
    return value, (
        f"{detail.percentage:g}% av {format_sek(detail.base_value)}{_timescale_label(detail.timescale)}"
    )


def _count_gain(detail: CountGain, calendar: CalendarConfig) -> tuple[float, str]:
    value = detail.count * detail.value_per_unit * period_multiplier(detail.timescale, calendar)
    return value, (
        f"{detail.count:g} enheter{_timescale_label(detail.timescale)} × {format_sek(detail.value_per_unit)}"
    )


def _other_gain(detail: OtherGain, calendar: CalendarConfig) -> tuple[float, str]:
    unit = detail.custom_unit or "enheter"
    value = detail.amount * detail.value_per_unit * period_multiplier(detail.timescale, calendar)
    return value, (
        f"{detail.amount:g} {unit}{_timescale_label(detail.timescale)} × {format_sek(detail.value_per_unit)}"
    )


_GAIN_NORMALIZERS: dict[type, Callable[[Any, CalendarConfig], tuple[float, str]]] = {
    HoursGain: _hours_gain,
    CurrencyGain: _currency_gain,
    PercentageGain: _percentage_gain,
    CountGain: _count_gain,
    OtherGain: _other_gain,
}


def normalize_financial(details: Any, config: EngineConfig | None = None) -> NormalizedValue | None:
    """
    Calculate the monetary value of a financial effect

    Args:
        details: Raw financialDetails or a parsed FinancialDetails
        config: EngineConfig (loads from env if not provided)

    Returns:
        NormalizedValue, or None when details are absent. An unknown value
        unit or a missing detail group yields a value of 0.
    """
    if not isinstance(details, FinancialDetails):
        details = parse_financial_details(details)
    if details is None:
        return None
    if config is None:
        config = load_config()

    if details.value_unit is None:
        return NormalizedValue(value=0.0, description="Värdeenhet saknas")
    if details.detail is None:
        return NormalizedValue(value=0.0, description=f"Uppgifter saknas ({details.value_unit.value})")

    value, description = _GAIN_NORMALIZERS[type(details.detail)](details.detail, config.calendar)
    value, description = _annualize(
        value,
        description,
        details.annualization_years,
        details.detail.timescale,
        config,
        legacy_monthly=not isinstance(details.detail, HoursGain),
    )
    return NormalizedValue(value=max(0.0, value), description=description)


# --- Redistributions ---


def _direction(saved: float, saving: str, increase: str) -> str:
    return saving if saved > 0 else increase


def _hours_shift(detail: HoursShift, calendar: CalendarConfig) -> tuple[float, str, float]:
    label = _timescale_label(detail.timescale)
    if detail.affected_people > 0 and (
        detail.current_time_per_person > 0 or detail.new_time_per_person > 0
    ):
        multiplier = period_multiplier(detail.timescale, calendar)
        current_total = detail.affected_people * detail.current_time_per_person * multiplier
        new_total = detail.affected_people * detail.new_time_per_person * multiplier
        basis = (
            f"{detail.affected_people:g} personer: "
            f"{detail.current_time_per_person:g} → {detail.new_time_per_person:g} timmar{label}"
        )
    else:
        current_total = detail.current_hours
        new_total = detail.new_hours
        basis = f"{detail.current_hours:g} → {detail.new_hours:g} timmar{label}"

    saved = current_total - new_total
    value = abs(saved) * detail.hourly_rate
    description = f"{basis} = {abs(saved):.0f} {_direction(saved, 'besparade', 'extra')} timmar"
    if detail.hourly_rate > 0:
        description += f" × {format_sek(detail.hourly_rate)}/timme"
    return value, description, saved


def _currency_shift(detail: CurrencyShift, calendar: CalendarConfig) -> tuple[float, str, float]:
    saved = detail.current_amount - detail.new_amount
    value = abs(saved) * period_multiplier(detail.timescale, calendar)
    description = (
        f"{format_sek(abs(saved))} {_direction(saved, 'besparade', 'extra kostnad')}"
        f"{_timescale_label(detail.timescale)}"
    )
    return value, description, saved


def _percentage_shift(detail: PercentageShift, calendar: CalendarConfig) -> tuple[float, str, float]:
    saved = (detail.current_percentage - detail.new_percentage) / 100 * detail.base_value
    value = abs(saved) * period_multiplier(detail.timescale, calendar)
    description = (
        f"{detail.current_percentage:g}% → {detail.new_percentage:g}% av {format_sek(detail.base_value)}"
        f" = {format_sek(abs(saved))} {_direction(saved, 'besparade', 'extra kostnad')}"
        f"{_timescale_label(detail.timescale)}"
    )
    return value, description, saved


def _count_shift(detail: CountShift, calendar: CalendarConfig) -> tuple[float, str, float]:
    saved = detail.current_count - detail.new_count
    value = abs(saved) * detail.value_per_unit * period_multiplier(detail.timescale, calendar)
    description = (
        f"{abs(saved):g} {_direction(saved, 'färre', 'fler')} enheter"
        f"{_timescale_label(detail.timescale)}"
    )
    if detail.value_per_unit > 0:
        description += f" × {format_sek(detail.value_per_unit)}/enhet"
    return value, description, saved


def _other_shift(detail: OtherShift, calendar: CalendarConfig) -> tuple[float, str, float]:
    unit = detail.custom_unit or "enheter"
    saved = detail.current_amount - detail.new_amount
    value = abs(saved) * detail.value_per_unit * period_multiplier(detail.timescale, calendar)
    description = (
        f"{abs(saved):g} {_direction(saved, 'färre', 'fler')} {unit}"
        f"{_timescale_label(detail.timescale)}"
    )
    if detail.value_per_unit > 0:
        description += f" × {format_sek(detail.value_per_unit)}/{unit}"
    return value, description, saved


_SHIFT_NORMALIZERS: dict[type, Callable[[Any, CalendarConfig], tuple[float, str, float]]] = {
    HoursShift: _hours_shift,
    CurrencyShift: _currency_shift,
    PercentageShift: _percentage_shift,
    CountShift: _count_shift,
    OtherShift: _other_shift,
}


def normalize_redistribution(details: Any, config: EngineConfig | None = None) -> NormalizedValue | None:
    """
    Calculate the monetary value of a redistribution effect

    The saved amount is the signed difference before - after. Its sign only
    decides the wording of the description (saving vs increase); the value is
    always the magnitude.

    Args:
        details: Raw redistributionDetails or a parsed RedistributionDetails
        config: EngineConfig (loads from env if not provided)

    Returns:
        NormalizedValue (with saved_amount in the effect's own unit), or None
        when details are absent.
    """
    if not isinstance(details, RedistributionDetails):
        details = parse_redistribution_details(details)
    if details is None:
        return None
    if config is None:
        config = load_config()

    if details.value_unit is None:
        return NormalizedValue(value=0.0, description="Värdeenhet saknas", saved_amount=0.0)
    if details.detail is None:
        return NormalizedValue(
            value=0.0,
            description=f"Uppgifter saknas ({details.value_unit.value})",
            saved_amount=0.0,
        )

    value, description, saved = _SHIFT_NORMALIZERS[type(details.detail)](
        details.detail, config.calendar
    )
    value, description = _annualize(
        value,
        description,
        details.annualization_years,
        details.detail.timescale,
        config,
        legacy_monthly=not isinstance(details.detail, HoursShift),
    )
    return NormalizedValue(value=max(0.0, value), description=description, saved_amount=saved)


# --- Qualitative effects ---


def qualitative_ratio(details: Any) -> float | None:
    """
    Fractional improvement of a rating-scale effect

    ratio = (target rating - current rating) / current rating

    Negative and zero improvements are returned as they are.

    Args:
        details: Raw qualitativeDetails or a parsed QualitativeDetails

    Returns:
        Improvement ratio, or None when details are absent or the current
        rating is not positive.
    """
    if not isinstance(details, QualitativeDetails):
        details = parse_qualitative_details(details)
    if details is None or details.current_rating <= 0:
        return None
    return (details.target_rating - details.current_rating) / details.current_rating
