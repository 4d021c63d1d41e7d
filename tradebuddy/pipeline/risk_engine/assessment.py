"""Deterministic trade assessment from risk metrics.

A fixed decision table over (risk/reward, probability of profit), evaluated
top to bottom with the first match winning. The order matters: the
probability-only and ratio-only rules near the bottom catch what the
combined rules above them miss.
"""

import math
from typing import Callable, List, Optional, Tuple

from .constants import (
    CAPITAL_WARNING_THRESHOLD,
    MSG_BALANCED,
    MSG_EXCELLENT_RR,
    MSG_FAVORABLE,
    MSG_HIGH_PROBABILITY,
    MSG_INSUFFICIENT_DATA,
    MSG_LIMITED_REWARD,
    MSG_LOW_PROBABILITY,
    MSG_NORMAL_RANGES,
    MSG_RISK_HEAVY,
    MSG_RR_UNAVAILABLE,
    RISK_LEVEL_COLORS,
    WARN_CAPITAL,
    WARN_POP_UNAVAILABLE,
)
from .types import Assessment, AssessmentFactors, Metrics, Unbounded

__all__ = ["RULES", "generate_assessment", "risk_level_color"]

# (predicate(rr, pop), message, risk level)
Rule = Tuple[Callable[[float, float], bool], str, str]

RULES: List[Rule] = [
    (lambda rr, pop: rr >= 1.5 and pop < 0.45,                       MSG_RISK_HEAVY,       "high"),
    (lambda rr, pop: 0.7 <= rr < 1.5 and 0.45 <= pop <= 0.6,         MSG_BALANCED,         "medium"),
    (lambda rr, pop: rr < 0.7 and pop > 0.6,                         MSG_FAVORABLE,        "low"),
    (lambda rr, pop: pop > 0.7,                                      MSG_HIGH_PROBABILITY, "low"),
    (lambda rr, pop: pop < 0.35,                                     MSG_LOW_PROBABILITY,  "high"),
    (lambda rr, pop: rr >= 2.0,                                      MSG_EXCELLENT_RR,     "medium"),
    (lambda rr, pop: rr < 0.5,                                       MSG_LIMITED_REWARD,   "high"),
]

DEFAULT_RULE = (MSG_NORMAL_RANGES, "medium")


def _exceeds_capital_limit(max_risk) -> bool:
    if max_risk is None or isinstance(max_risk, Unbounded):
        return False
    return max_risk > CAPITAL_WARNING_THRESHOLD


def _classify(rr: float, pop: float) -> Tuple[str, str]:
    for predicate, message, level in RULES:
        if predicate(rr, pop):
            return message, level
    return DEFAULT_RULE


def generate_assessment(metrics: Metrics) -> Assessment:
    """Classify metrics into guidance text and a risk level.

    Missing ratio or probability values count as 0 in the threshold rules;
    only the "both missing" and "ratio not finite" cases are reported as
    unknown. Capital and missing-POP warnings are appended independently.
    """
    rr: Optional[float] = metrics.risk_reward
    pop: Optional[float] = metrics.probability_of_profit
    factors = AssessmentFactors(
        risk_reward=rr,
        probability_of_profit=pop,
        max_risk=metrics.max_risk,
        max_reward=metrics.max_reward,
    )

    if rr is None and pop is None:
        return Assessment(text=MSG_INSUFFICIENT_DATA, risk_level="unknown", factors=factors)

    if rr is not None and not math.isfinite(rr):
        return Assessment(text=MSG_RR_UNAVAILABLE, risk_level="unknown", factors=factors)

    text, risk_level = _classify(rr or 0.0, pop or 0.0)

    warnings = []
    if _exceeds_capital_limit(metrics.max_risk):
        warnings.append(WARN_CAPITAL)
    if pop is None:
        warnings.append(WARN_POP_UNAVAILABLE)
    if warnings:
        text = " ".join([text] + warnings)

    return Assessment(text=text, risk_level=risk_level, factors=factors)


def risk_level_color(level: str) -> str:
    """Badge color for a risk level; unknown levels are gray."""
    return RISK_LEVEL_COLORS.get(level, RISK_LEVEL_COLORS["unknown"])
