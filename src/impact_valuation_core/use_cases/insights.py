"""
ROI Insights

Turns ROI metrics into short Swedish insight and recommendation texts plus a
coarse risk level, for the summaries shown next to the numbers.
"""

from impact_valuation_core.domain.value_objects import ROIInsights, ROIMetrics

# Economic ROI bands (ratio): lower bound -> (insight, risk level)
_ECONOMIC_BANDS = [
    (1.0, "Utmärkt ekonomisk ROI över 100%", "low"),
    (0.5, "Bra ekonomisk ROI över 50%", "low"),
    (0.0, "Positiv ekonomisk ROI", "medium"),
]

_QUALITATIVE_BANDS = [
    (0.5, "Höga kvalitativa förbättringar"),
    (0.2, "Måttliga kvalitativa förbättringar"),
    (0.0, "Låga kvalitativa förbättringar"),
]


def roi_insights(metrics: ROIMetrics) -> ROIInsights:
    """
    Generate insights and recommendations from ROI metrics

    Args:
        metrics: ROIMetrics of one project

    Returns:
        ROIInsights (insights, recommendations, risk level low/medium/high)
    """
    insights: list[str] = []
    recommendations: list[str] = []

    # Economic ROI
    risk_level = "high"
    for lower, text, risk in _ECONOMIC_BANDS:
        if metrics.economic_roi > lower:
            insights.append(text)
            risk_level = risk
            break
    else:
        insights.append("Negativ ekonomisk ROI - kräver noggrannare analys")

    # Qualitative ROI
    for lower, text in _QUALITATIVE_BANDS:
        if metrics.qualitative_roi > lower:
            insights.append(text)
            break

    # Effect mix
    summary = metrics.summary
    monetary_count = summary.financial_count + summary.redistribution_count
    if monetary_count > 0 and summary.qualitative_count > 0:
        insights.append("Balanserad mix av ekonomiska och kvalitativa effekter")
    elif monetary_count > 0:
        insights.append("Fokus på ekonomiska effekter")
    elif summary.qualitative_count > 0:
        insights.append("Fokus på kvalitativa effekter")

    # Payback period (cost / (value / 12) comes out in months)
    payback = metrics.payback_period_years
    if payback <= 0:
        if metrics.total_cost > 0:
            insights.append("Ingen återbetalningstid kan beräknas")
    elif payback < 12:
        insights.append("Snabb återbetalningstid under 1 år")
    elif payback < 36:
        insights.append("Måttlig återbetalningstid 1-3 år")
    else:
        insights.append("Lång återbetalningstid över 3 år")

    # Recommendations
    if metrics.economic_roi < 0:
        recommendations.append("Överväg att justera projektets omfattning eller kostnader")
    if summary.qualitative_count == 0:
        recommendations.append("Överväg att inkludera kvalitativa effektmätningar")
    if payback > 60:
        recommendations.append("Överväg att dela upp projektet i mindre faser")

    return ROIInsights(
        insights=insights,
        recommendations=recommendations,
        risk_level=risk_level,
    )
