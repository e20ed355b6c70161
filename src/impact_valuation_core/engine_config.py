"""
Valuation Engine Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from impact_valuation_core.domain.constants import (
    MONTHS_PER_YEAR,
    WORK_DAYS_PER_YEAR,
    WORK_WEEKS_PER_YEAR,
)


def _env_bool(key: str, default: bool) -> bool:
    """Convert an environment variable to bool"""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


@dataclass
class CalendarConfig:
    """Work calendar used to turn periodic effects into yearly figures"""
    work_days_per_year: int = WORK_DAYS_PER_YEAR
    work_weeks_per_year: int = WORK_WEEKS_PER_YEAR
    months_per_year: int = MONTHS_PER_YEAR


@dataclass
class AnnualizationConfig:
    """Annualization configuration"""
    # Multiply per_month effects by an extra 12 when annualizing, as the
    # project detail page historically did
    legacy_monthly_multiplier: bool = False


@dataclass
class EngineConfig:
    """Overall engine configuration"""
    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    annualization: AnnualizationConfig = field(default_factory=AnnualizationConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"engine_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Create from dictionary (handles presence/absence of engine_config key)"""
        config_data = data.get("engine_config", data)
        calendar = CalendarConfig(**config_data.get("calendar", {}))
        annualization = AnnualizationConfig(**config_data.get("annualization", {}))
        return cls(calendar=calendar, annualization=annualization)


def load_config() -> EngineConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        EngineConfig

    Raises:
        ValueError: If a numeric environment variable cannot be parsed
    """
    calendar = CalendarConfig(
        work_days_per_year=_env_int("VALUATION_WORK_DAYS_PER_YEAR", WORK_DAYS_PER_YEAR),
        work_weeks_per_year=_env_int("VALUATION_WORK_WEEKS_PER_YEAR", WORK_WEEKS_PER_YEAR),
        months_per_year=_env_int("VALUATION_MONTHS_PER_YEAR", MONTHS_PER_YEAR),
    )
    annualization = AnnualizationConfig(
        legacy_monthly_multiplier=_env_bool("VALUATION_LEGACY_MONTHLY_ANNUALIZATION", False),
    )
    return EngineConfig(calendar=calendar, annualization=annualization)
