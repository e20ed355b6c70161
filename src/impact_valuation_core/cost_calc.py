"""
Cost Normalization

Reduces a cost entry of any of the four cost shapes (hours, fixed, monthly,
yearly) to a single monetary amount in SEK.
"""

from typing import Any, Iterable

from impact_valuation_core.domain.entities import (
    CostEntry,
    FixedCost,
    HoursCost,
    MonthlyCost,
    UnrecognizedCost,
    YearlyCost,
)
from impact_valuation_core.domain.value_objects import NormalizedValue
from impact_valuation_core.effect_calc import format_sek
from impact_valuation_core.entry_parser import parse_cost_entry


def _as_cost_entry(entry: Any) -> CostEntry:
    if isinstance(entry, (HoursCost, FixedCost, MonthlyCost, YearlyCost, UnrecognizedCost)):
        return entry
    return parse_cost_entry(entry)


def normalize_cost(entry: Any) -> float:
    """
    Calculate the amount of a single cost entry

    hours   = hours * hourly rate
    fixed   = fixed amount
    monthly = monthly amount * number of months
    yearly  = yearly amount * number of years

    Args:
        entry: Raw cost entry or a parsed CostEntry

    Returns:
        Amount in SEK (never negative). 0 for an unknown or missing costUnit.
    """
    entry = _as_cost_entry(entry)

    if isinstance(entry, HoursCost):
        amount = entry.hours * entry.hourly_rate
    elif isinstance(entry, FixedCost):
        amount = entry.fixed_amount
    elif isinstance(entry, MonthlyCost):
        amount = entry.monthly_amount * entry.monthly_duration
    elif isinstance(entry, YearlyCost):
        amount = entry.yearly_amount * entry.yearly_duration
    else:
        return 0.0

    return max(0.0, amount)


def total_cost(entries: Iterable[Any]) -> float:
    """
    Sum all cost entries of a project

    Entries are summed in input order so that the floating-point result is
    reproducible for the same input.

    Args:
        entries: Raw or parsed cost entries

    Returns:
        Total cost in SEK
    """
    total = 0.0
    for entry in entries:
        total += normalize_cost(entry)
    return total


def describe_cost(entry: Any) -> NormalizedValue:
    """
    Cost line for display: the amount plus a short description

    The entry's own label is preferred over the generated text.
    """
    entry = _as_cost_entry(entry)
    amount = normalize_cost(entry)

    if isinstance(entry, HoursCost):
        generated = f"{entry.hours:g} timmar × {format_sek(entry.hourly_rate)}/tim"
    elif isinstance(entry, FixedCost):
        generated = "Fast kostnad"
    elif isinstance(entry, MonthlyCost):
        generated = f"{format_sek(entry.monthly_amount)}/mån × {entry.monthly_duration:g} månader"
    elif isinstance(entry, YearlyCost):
        generated = f"{format_sek(entry.yearly_amount)}/år × {entry.yearly_duration:g} år"
    else:
        generated = f"Okänd kostnadstyp ({entry.cost_unit or 'saknas'})"

    return NormalizedValue(value=amount, description=entry.label or generated)
