"""
Domain Value Objects

Defines the results produced by the engine: normalized values, ROI metrics
and completeness scores. All of them are recomputed from a project snapshot
on every call and are never persisted.
"""

from dataclasses import asdict, dataclass, field


@dataclass
class NormalizedValue:
    """Monetary value (SEK) of one effect plus a human-readable derivation"""

    value: float
    description: str
    saved_amount: float | None = None  # signed before - after, redistribution only


@dataclass
class CombinedROI:
    """Economic and qualitative ROI reported side by side, never blended"""
    economic: float = 0.0
    qualitative: float = 0.0


@dataclass
class EffectValuation:
    """Valuation of a single effect branch"""
    dimension: str
    kind: str        # financial / redistribution / qualitative
    label: str       # measurement name, resource type or factor
    value: float     # SEK; 0 for qualitative effects
    description: str
    roi: float = 0.0  # value / total cost
    improvement: float | None = None  # qualitative ratio


@dataclass
class DimensionBreakdown:
    """Aggregated value per value dimension"""
    total_value: float = 0.0
    effect_count: int = 0


@dataclass
class ROISummary:
    total_effects: int = 0
    financial_count: int = 0
    redistribution_count: int = 0
    qualitative_count: int = 0
    dimensions_covered: frozenset[str] = field(default_factory=frozenset)


@dataclass
class ROIMetrics:
    """ROI metrics for one project"""
    total_cost: float = 0.0
    total_monetary_value: float = 0.0
    economic_roi: float = 0.0
    qualitative_roi: float = 0.0
    combined_roi: CombinedROI = field(default_factory=CombinedROI)
    payback_period_years: float = 0.0
    summary: ROISummary = field(default_factory=ROISummary)
    effects: list[EffectValuation] = field(default_factory=list)
    dimension_breakdown: dict[str, DimensionBreakdown] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ROIMetrics":
        """All-zero metrics"""
        return cls()

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary"""
        data = asdict(self)
        data["summary"]["dimensions_covered"] = sorted(self.summary.dimensions_covered)
        return data


@dataclass
class CategoryScore:
    score: int
    max: int
    label: str


@dataclass
class ProjectScore:
    """Data completeness score for one project"""
    total_score: int
    max_score: int
    percentage: int
    breakdown: dict[str, CategoryScore]
    level: str
    missing_high_value: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary"""
        return asdict(self)


@dataclass
class ROIInsights:
    """Textual interpretation of ROI metrics"""
    insights: list[str]
    recommendations: list[str]
    risk_level: str  # low / medium / high
