"""
Tests for engine_config.py
"""

import pytest

from impact_valuation_core.engine_config import (
    AnnualizationConfig,
    CalendarConfig,
    EngineConfig,
    load_config,
)

ENV_KEYS = [
    "VALUATION_WORK_DAYS_PER_YEAR",
    "VALUATION_WORK_WEEKS_PER_YEAR",
    "VALUATION_MONTHS_PER_YEAR",
    "VALUATION_LEGACY_MONTHLY_ANNUALIZATION",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestCalendarConfig:
    def test_defaults(self):
        config = CalendarConfig()
        assert config.work_days_per_year == 235
        assert config.work_weeks_per_year == 47
        assert config.months_per_year == 12


class TestAnnualizationConfig:
    def test_corrected_by_default(self):
        assert AnnualizationConfig().legacy_monthly_multiplier is False


class TestEngineConfig:
    def test_to_dict(self):
        data = EngineConfig().to_dict()
        assert data == {
            "engine_config": {
                "calendar": {"work_days_per_year": 235, "work_weeks_per_year": 47, "months_per_year": 12},
                "annualization": {"legacy_monthly_multiplier": False},
            }
        }

    def test_from_dict_roundtrip(self):
        config = EngineConfig(
            calendar=CalendarConfig(work_days_per_year=220),
            annualization=AnnualizationConfig(legacy_monthly_multiplier=True),
        )
        assert EngineConfig.from_dict(config.to_dict()) == config

    def test_from_dict_without_wrapper_key(self):
        config = EngineConfig.from_dict({"calendar": {"months_per_year": 13}})
        assert config.calendar.months_per_year == 13
        assert config.calendar.work_days_per_year == 235
        assert config.annualization.legacy_monthly_multiplier is False


class TestLoadConfig:
    def test_defaults_without_env(self, clean_env):
        assert load_config() == EngineConfig()

    def test_reads_env(self, clean_env):
        clean_env.setenv("VALUATION_WORK_DAYS_PER_YEAR", "220")
        clean_env.setenv("VALUATION_WORK_WEEKS_PER_YEAR", "44")
        clean_env.setenv("VALUATION_LEGACY_MONTHLY_ANNUALIZATION", "true")
        config = load_config()
        assert config.calendar.work_days_per_year == 220
        assert config.calendar.work_weeks_per_year == 44
        assert config.calendar.months_per_year == 12
        assert config.annualization.legacy_monthly_multiplier is True

    @pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("TRUE", True), ("0", False), ("no", False)])
    def test_bool_env(self, clean_env, raw, expected):
        clean_env.setenv("VALUATION_LEGACY_MONTHLY_ANNUALIZATION", raw)
        assert load_config().annualization.legacy_monthly_multiplier is expected

    def test_invalid_int_raises(self, clean_env):
        clean_env.setenv("VALUATION_MONTHS_PER_YEAR", "twelve")
        with pytest.raises(ValueError, match="VALUATION_MONTHS_PER_YEAR"):
            load_config()
