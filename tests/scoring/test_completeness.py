"""Tests for project completeness scoring"""

import copy
import json

import pytest

from impact_valuation_core.scoring.completeness import completeness_level, score_project

TITLE_ONLY_MISSING = [
    "Budget information",
    "Effect analysis",
    "Technical information",
    "Leadership information",
    "Legal compliance information",
]


def _hours_financial():
    return {
        "measurementName": "Sparad handläggartid",
        "valueUnit": "hours",
        "hoursDetails": {"affectedPeople": 5, "timePerPerson": 2, "timescale": "per_week", "hourlyRate": 500},
        "annualizationYears": 1,
    }


def _currency_financial(amount=100000):
    return {
        "measurementName": "Minskade licenskostnader",
        "valueUnit": "currency",
        "currencyDetails": {"amount": amount, "timescale": "per_year"},
        "annualizationYears": 2,
    }


def _currency_redistribution():
    return {
        "resourceType": "Driftbudget",
        "valueUnit": "currency",
        "currencyDetails": {"currentAmount": 50000, "newAmount": 30000, "timescale": "per_year"},
        "annualizationYears": 1,
    }


def _qualitative(current=4, target=7):
    return {"factor": "Medborgarnöjdhet", "currentRating": current, "targetRating": target, "annualizationYears": 1}


def _complete_project():
    return {
        "title": "AI-stöd för bygglov",
        "intro": "Automatisk förhandsgranskning",
        "problem": "Långa handläggningstider",
        "opportunity": "Snabbare beslut",
        "responsible": "Stadsbyggnadskontoret",
        "areas": ["Samhällsbyggnad"],
        "value_dimensions": ["Effektivitet"],
        "municipality_ids": ["0180"],
        "cost_data": {
            "hasDedicatedBudget": True,
            "budgetDetails": {"budgetAmount": 500000},
            "actualCostDetails": {"costEntries": [
                {"costUnit": "hours", "hoursDetails": {"hours": 40, "hourlyRate": 800}},
                {"costUnit": "fixed", "fixedDetails": {"fixedAmount": 15000}},
                {"costUnit": "monthly", "monthlyDetails": {"monthlyAmount": 5000, "monthlyDuration": 6}},
            ]},
        },
        "effects_data": {"effectDetails": [
            {
                "valueDimension": "Effektivitet",
                "hasQuantitative": True,
                "hasQualitative": True,
                "quantitativeDetails": {"effectType": "financial", "financialDetails": _hours_financial()},
                "qualitativeDetails": _qualitative(),
            },
            {
                "valueDimension": "Ekonomi",
                "hasQuantitative": True,
                "quantitativeDetails": {
                    "effectType": "redistribution",
                    "financialDetails": _currency_financial(),
                    "redistributionDetails": _currency_redistribution(),
                },
            },
            {"valueDimension": "Kvalitet", "hasQualitative": True, "qualitativeDetails": _qualitative(5, 8)},
        ]},
        "technical_data": {
            "system_name": "Granskaren",
            "ai_methodology": "Dokumentklassificering",
            "deployment_environment": "Molntjänst",
            "data_types": ["Dokument"],
            "data_sources": ["Ärendesystem"],
            "technical_obstacles": "Inskannade ritningar",
        },
        "leadership_data": {"sponsor": "Förvaltningschef"},
        "legal_data": {"gdpr_assessment": True},
    }


def _effects_project(*entries):
    return {"effects_data": {"effectDetails": list(entries)}}


class TestScoreProject:
    def test_title_only(self):
        score = score_project({"title": "AI-chatbot"})
        assert score.breakdown["basic"].score == 2
        assert score.total_score == 2
        assert score.max_score == 100
        assert score.percentage == 2
        assert score.level == "Grundläggande"
        assert score.missing_high_value == TITLE_ONLY_MISSING

    def test_complete_project(self):
        score = score_project(_complete_project())
        assert {key: category.score for key, category in score.breakdown.items()} == {
            "basic": 15,
            "financial": 25,
            "effects": 35,
            "technical": 15,
            "governance": 10,
        }
        assert score.percentage == 100
        assert score.level == "Exemplarisk"
        assert score.missing_high_value == []

    def test_breakdown_labels_and_maxima(self):
        breakdown = score_project({}).breakdown
        assert breakdown["basic"].label == "Grundinfo"
        assert breakdown["effects"].max == 35
        assert all(category.score <= category.max for category in breakdown.values())

    @pytest.mark.parametrize("project", [
        None,
        "garbage",
        42,
        [],
        {"areas": 5, "technical_data": [1, 2]},
        {"effects_data": {"effectDetails": [{
            "hasQuantitative": True,
            "quantitativeDetails": {"financialDetails": {"valueUnit": ["hours"], "measurementName": "x"}},
        }]}},
        {"effects_data": {"effectDetails": [{
            "hasQuantitative": True,
            "quantitativeDetails": {"redistributionDetails": {"valueUnit": {"a": 1}, "resourceType": "x"}},
        }]}},
        {"cost_data": {"budgetDetails": {"budgetAmount": 10**400}}},
    ])
    def test_malformed_projects_never_raise(self, project):
        score = score_project(project)
        assert 0 <= score.percentage <= 100

    def test_idempotent(self):
        project = _complete_project()
        snapshot = copy.deepcopy(project)
        assert score_project(project) == score_project(project)
        assert project == snapshot

    def test_json_encoded_groups(self):
        project = _complete_project()
        for key in ("cost_data", "effects_data", "technical_data", "leadership_data", "legal_data"):
            project[key] = json.dumps(project[key])
        assert score_project(project).percentage == 100


class TestBasicScore:
    def test_bonus_at_ten_points(self):
        project = {
            "title": "T", "intro": "I", "problem": "P", "opportunity": "O",
            "areas": ["Skola"], "value_dimensions": ["Kvalitet"],
        }
        assert score_project(project).breakdown["basic"].score == 12

    def test_blank_strings_do_not_count(self):
        assert score_project({"title": "   ", "intro": ""}).breakdown["basic"].score == 0

    def test_county_codes_count_as_geography(self):
        assert score_project({"county_codes": ["01"]}).breakdown["basic"].score == 1


class TestFinancialScore:
    def test_budget_answered_without_cost_entries(self):
        score = score_project({"cost_data": {"hasDedicatedBudget": False}})
        assert score.breakdown["financial"].score == 4
        assert "Detailed cost breakdown" in score.missing_high_value
        assert "Budget information" not in score.missing_high_value

    def test_budget_amount(self):
        score = score_project({"cost_data": {"hasDedicatedBudget": True, "budgetDetails": {"budgetAmount": "250 000"}}})
        assert score.breakdown["financial"].score == 9

    def test_cost_entries_without_budget_answer(self):
        project = {"cost_data": {"actualCostDetails": {"costEntries": [
            {"costUnit": "fixed", "fixedDetails": {"fixedAmount": 1000}},
            {"costUnit": "weekly"},
        ]}}}
        score = score_project(project)
        assert score.breakdown["financial"].score == 6 + 4 + 2
        assert score.missing_high_value[0] == "Budget information"
        assert "Detailed cost breakdown" not in score.missing_high_value


class TestEffectsScore:
    def test_no_effect_entries(self):
        score = score_project({"effects_data": {"effectDetails": []}})
        assert score.breakdown["effects"].score == 0
        assert "Effect analysis" in score.missing_high_value

    def test_incomplete_entries_score_nothing(self):
        project = _effects_project(
            {"hasQuantitative": True, "quantitativeDetails": {"financialDetails": {"valueUnit": "hours"}}},
            {"hasQualitative": True, "qualitativeDetails": _qualitative(4, 11)},
        )
        score = score_project(project)
        assert score.breakdown["effects"].score == 0
        assert "Complete effect details" in score.missing_high_value
        assert "Effect analysis" not in score.missing_high_value

    def test_details_require_the_matching_flag(self):
        project = _effects_project({"quantitativeDetails": {"financialDetails": _hours_financial()}})
        assert score_project(project).breakdown["effects"].score == 0

    def test_complete_detailed_financial(self):
        project = _effects_project({"hasQuantitative": True, "quantitativeDetails": {"financialDetails": _hours_financial()}})
        assert score_project(project).breakdown["effects"].score == 16 + 4 + 1

    def test_complete_but_not_detailed(self):
        project = _effects_project({
            "hasQuantitative": True,
            "quantitativeDetails": {"financialDetails": _currency_financial(amount=0)},
        })
        assert score_project(project).breakdown["effects"].score == 16 + 4

    def test_qualitative_only(self):
        project = _effects_project({"hasQualitative": "true", "qualitativeDetails": _qualitative()})
        assert score_project(project).breakdown["effects"].score == 16 + 3

    def test_both_kinds_bonus(self):
        project = _effects_project(
            {"hasQuantitative": True, "quantitativeDetails": {"redistributionDetails": _currency_redistribution()}},
            {"hasQualitative": True, "qualitativeDetails": _qualitative()},
        )
        assert score_project(project).breakdown["effects"].score == 16 + 4 + 3 + 1 + 2

    def test_redistribution_with_zero_after_value_is_detailed(self):
        redistribution = _currency_redistribution()
        redistribution["currencyDetails"]["newAmount"] = 0
        project = _effects_project({"hasQuantitative": True, "quantitativeDetails": {"redistributionDetails": redistribution}})
        assert score_project(project).breakdown["effects"].score == 16 + 4 + 1


class TestTechnicalScore:
    def test_system_name_only(self):
        score = score_project({"technical_data": {"system_name": "Granskaren"}})
        assert score.breakdown["technical"].score == 4
        assert "Technical information" not in score.missing_high_value

    def test_data_without_system_or_method(self):
        score = score_project({"technical_data": {"data_types": ["Text"]}})
        assert score.breakdown["technical"].score == 3
        assert "Technical information" in score.missing_high_value


class TestGovernanceScore:
    def test_leadership_only(self):
        score = score_project({"leadership_data": {"sponsor": "KS"}})
        assert score.breakdown["governance"].score == 5
        assert "Leadership information" not in score.missing_high_value
        assert "Legal compliance information" in score.missing_high_value


class TestCompletenessLevel:
    @pytest.mark.parametrize("percentage,level", [
        (0, "Grundläggande"),
        (49, "Grundläggande"),
        (50, "Utvecklad"),
        (69, "Utvecklad"),
        (70, "Avancerad"),
        (84, "Avancerad"),
        (85, "Komplett"),
        (94, "Komplett"),
        (95, "Exemplarisk"),
        (100, "Exemplarisk"),
    ])
    def test_thresholds(self, percentage, level):
        assert completeness_level(percentage) == level
