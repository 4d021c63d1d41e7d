"""Risk & Assessment Engine: closed-form risk metrics and a deterministic assessment.

Public API:
    compute_metrics(legs, entry_price, quantity, ...) -> Metrics
    generate_assessment(metrics) -> Assessment
"""

from .risk import (
    calculate_breakeven,
    calculate_max_reward,
    calculate_max_risk,
    calculate_risk_reward,
    compute_metrics,
    days_to_expiry,
    estimate_pop,
    leg_shape,
    profit_direction,
)
from .assessment import generate_assessment, risk_level_color
from .stats import normal_cdf
from .types import UNBOUNDED, Assessment, AssessmentFactors, Leg, Metrics, TradeInput, Unbounded

__all__ = [
    "compute_metrics",
    "calculate_max_risk",
    "calculate_max_reward",
    "calculate_risk_reward",
    "calculate_breakeven",
    "estimate_pop",
    "profit_direction",
    "days_to_expiry",
    "leg_shape",
    "normal_cdf",
    "generate_assessment",
    "risk_level_color",
    "Leg",
    "Metrics",
    "Assessment",
    "AssessmentFactors",
    "TradeInput",
    "Unbounded",
    "UNBOUNDED",
]
