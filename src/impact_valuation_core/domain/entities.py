"""
Domain Entities

Typed forms of the cost and effect entries recorded on a project.

Each discriminated shape (costUnit, valueUnit, effectType) is modelled as a
tagged union: the discriminator selects exactly one detail dataclass, so an
entry never carries more than one active detail group.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CostUnit(str, Enum):
    HOURS = "hours"
    FIXED = "fixed"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ValueUnit(str, Enum):
    HOURS = "hours"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    COUNT = "count"
    OTHER = "other"


class Timescale(str, Enum):
    PER_DAY = "per_day"
    PER_WEEK = "per_week"
    PER_MONTH = "per_month"
    PER_YEAR = "per_year"
    ONE_TIME = "one_time"


class EffectType(str, Enum):
    FINANCIAL = "financial"
    REDISTRIBUTION = "redistribution"


# --- Cost entries ---


@dataclass
class HoursCost:
    """Cost billed by the hour"""
    hours: float = 0.0
    hourly_rate: float = 0.0
    label: str = ""


@dataclass
class FixedCost:
    """One fixed amount"""
    fixed_amount: float = 0.0
    label: str = ""


@dataclass
class MonthlyCost:
    """Recurring monthly cost over a number of months"""
    monthly_amount: float = 0.0
    monthly_duration: float = 1.0
    label: str = ""


@dataclass
class YearlyCost:
    """Recurring yearly cost over a number of years"""
    yearly_amount: float = 0.0
    yearly_duration: float = 1.0
    label: str = ""


@dataclass
class UnrecognizedCost:
    """Entry whose costUnit is missing or unknown (economically inert)"""
    cost_unit: str | None = None
    label: str = ""


CostEntry = Union[HoursCost, FixedCost, MonthlyCost, YearlyCost, UnrecognizedCost]


# --- Financial (one-directional gain) detail groups ---


@dataclass
class HoursGain:
    affected_people: float = 0.0
    time_per_person: float = 0.0
    hourly_rate: float = 0.0
    hours: float = 0.0  # legacy flat hours
    timescale: Timescale | None = None


@dataclass
class CurrencyGain:
    amount: float = 0.0
    timescale: Timescale | None = None


@dataclass
class PercentageGain:
    percentage: float = 0.0
    base_value: float = 0.0
    timescale: Timescale | None = None


@dataclass
class CountGain:
    count: float = 0.0
    value_per_unit: float = 0.0
    timescale: Timescale | None = None


@dataclass
class OtherGain:
    amount: float = 0.0
    value_per_unit: float = 0.0
    custom_unit: str = ""
    timescale: Timescale | None = None


GainDetail = Union[HoursGain, CurrencyGain, PercentageGain, CountGain, OtherGain]


@dataclass
class FinancialDetails:
    """Financial effect: a new gain measured in one value unit"""
    measurement_name: str = ""
    value_unit: ValueUnit | None = None
    detail: GainDetail | None = None
    annualization_years: float = 1.0


# --- Redistribution (before/after) detail groups ---


@dataclass
class HoursShift:
    affected_people: float = 0.0
    current_time_per_person: float = 0.0
    new_time_per_person: float = 0.0
    hourly_rate: float = 0.0
    current_hours: float = 0.0  # legacy flat hours
    new_hours: float = 0.0      # legacy flat hours
    timescale: Timescale | None = None


@dataclass
class CurrencyShift:
    current_amount: float = 0.0
    new_amount: float = 0.0
    timescale: Timescale | None = None


@dataclass
class PercentageShift:
    current_percentage: float = 0.0
    new_percentage: float = 0.0
    base_value: float = 0.0
    timescale: Timescale | None = None


@dataclass
class CountShift:
    current_count: float = 0.0
    new_count: float = 0.0
    value_per_unit: float = 0.0
    timescale: Timescale | None = None


@dataclass
class OtherShift:
    current_amount: float = 0.0
    new_amount: float = 0.0
    value_per_unit: float = 0.0
    custom_unit: str = ""
    timescale: Timescale | None = None


ShiftDetail = Union[HoursShift, CurrencyShift, PercentageShift, CountShift, OtherShift]


@dataclass
class RedistributionDetails:
    """Redistribution effect: a resource moved from a before to an after state"""
    resource_type: str = ""
    value_unit: ValueUnit | None = None
    detail: ShiftDetail | None = None
    annualization_years: float = 1.0


# --- Effect entries ---


@dataclass
class QualitativeDetails:
    """Rating-scale (1-10) improvement claim"""
    factor: str = ""
    current_rating: float = 0.0
    target_rating: float = 0.0
    annualization_years: float = 1.0


@dataclass
class QuantitativeDetails:
    effect_type: EffectType | None = None
    financial: FinancialDetails | None = None
    redistribution: RedistributionDetails | None = None


@dataclass
class EffectEntry:
    """One recorded benefit claim tied to a value dimension"""
    value_dimension: str = ""
    has_qualitative: bool = False
    has_quantitative: bool = False
    qualitative: QualitativeDetails | None = None
    quantitative: QuantitativeDetails | None = None
    comment: str = ""
