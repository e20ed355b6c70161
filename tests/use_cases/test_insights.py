"""Tests for ROI insights"""

from impact_valuation_core.domain.value_objects import ROIMetrics, ROISummary
from impact_valuation_core.engine_config import EngineConfig
from impact_valuation_core.use_cases.insights import roi_insights
from impact_valuation_core.use_cases.valuation import compute_roi


def _metrics(economic_roi=0.0, qualitative_roi=0.0, payback=0.0, total_cost=100000.0, **counts):
    return ROIMetrics(
        total_cost=total_cost,
        economic_roi=economic_roi,
        qualitative_roi=qualitative_roi,
        payback_period_years=payback,
        summary=ROISummary(**counts),
    )


class TestRoiInsights:
    def test_strong_balanced_project(self):
        result = roi_insights(_metrics(
            economic_roi=1.5, qualitative_roi=0.6, payback=0.5, financial_count=1, qualitative_count=1,
        ))
        assert result.insights == [
            "Utmärkt ekonomisk ROI över 100%",
            "Höga kvalitativa förbättringar",
            "Balanserad mix av ekonomiska och kvalitativa effekter",
            "Snabb återbetalningstid under 1 år",
        ]
        assert result.recommendations == []
        assert result.risk_level == "low"

    def test_moderate_roi_is_medium_risk(self):
        result = roi_insights(_metrics(economic_roi=0.3, payback=24.0, redistribution_count=1))
        assert "Positiv ekonomisk ROI" in result.insights
        assert "Fokus på ekonomiska effekter" in result.insights
        assert "Måttlig återbetalningstid 1-3 år" in result.insights
        assert result.risk_level == "medium"

    def test_negative_roi(self):
        result = roi_insights(_metrics(economic_roi=-0.5, payback=84.0, financial_count=1))
        assert result.insights[0] == "Negativ ekonomisk ROI - kräver noggrannare analys"
        assert "Lång återbetalningstid över 3 år" in result.insights
        assert result.risk_level == "high"
        assert result.recommendations == [
            "Överväg att justera projektets omfattning eller kostnader",
            "Överväg att inkludera kvalitativa effektmätningar",
            "Överväg att dela upp projektet i mindre faser",
        ]

    def test_qualitative_only(self):
        result = roi_insights(_metrics(economic_roi=-1.0, qualitative_roi=0.25, qualitative_count=2))
        assert "Måttliga kvalitativa förbättringar" in result.insights
        assert "Fokus på kvalitativa effekter" in result.insights
        assert "Ingen återbetalningstid kan beräknas" in result.insights

    def test_empty_metrics(self):
        result = roi_insights(ROIMetrics.empty())
        assert "Ingen återbetalningstid kan beräknas" not in result.insights
        assert result.risk_level == "high"
        assert result.recommendations == ["Överväg att inkludera kvalitativa effektmätningar"]

    def test_payback_is_banded_in_months(self):
        """500 000 SEK paid back by 1 200 000 SEK/year takes 5 months"""
        metrics = compute_roi(
            [{
                "valueDimension": "Effektivitet",
                "hasQuantitative": True,
                "quantitativeDetails": {"financialDetails": {
                    "measurementName": "Besparing",
                    "valueUnit": "currency",
                    "currencyDetails": {"amount": 1200000, "timescale": "per_year"},
                }},
            }],
            [{"costUnit": "fixed", "fixedDetails": {"fixedAmount": 500000}}],
            config=EngineConfig(),
        )
        result = roi_insights(metrics)
        assert "Snabb återbetalningstid under 1 år" in result.insights
        assert "Lång återbetalningstid över 3 år" not in result.insights
        assert "Överväg att dela upp projektet i mindre faser" not in result.recommendations
