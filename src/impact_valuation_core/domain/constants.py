"""
Domain Constants

Centrally manages constants shared by the valuation and scoring engine.
"""

# Work calendar used to annualize periodic effects
WORK_DAYS_PER_YEAR = 235   # ~47 weeks * 5 days (vacation, holidays, sick leave)
WORK_WEEKS_PER_YEAR = 47   # 52 weeks minus ~5 weeks vacation/holidays
MONTHS_PER_YEAR = 12

# Value dimension that carries a free-text label in customValueDimension
CUSTOM_VALUE_DIMENSION = "Annat"

# Completeness score categories: key -> (max points, display label)
SCORE_CATEGORIES = {
    "basic": (15, "Grundinfo"),
    "financial": (25, "Budget & Kostnad"),
    "effects": (35, "Effekter & ROI"),
    "technical": (15, "Teknik & Data"),
    "governance": (10, "Organisation & Juridik"),
}

# Completeness level thresholds (percentage upper bounds, exclusive)
SCORE_LEVELS = [
    (50, "Grundläggande"),
    (70, "Utvecklad"),
    (85, "Avancerad"),
    (95, "Komplett"),
]
TOP_SCORE_LEVEL = "Exemplarisk"

# High-value gaps reported by the completeness scorer
MISSING_BUDGET = "Budget information"
MISSING_COST_BREAKDOWN = "Detailed cost breakdown"
MISSING_EFFECTS = "Effect analysis"
MISSING_EFFECT_DETAILS = "Complete effect details"
MISSING_TECHNICAL = "Technical information"
MISSING_LEADERSHIP = "Leadership information"
MISSING_LEGAL = "Legal compliance information"
