"""Data types for the risk and assessment engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class Unbounded(str, Enum):
    """Marks a naked single-leg figure that has no finite cap."""
    UNBOUNDED = "unbounded"


UNBOUNDED = Unbounded.UNBOUNDED

# A max risk / max reward figure: finite dollars or UNBOUNDED
Bound = Union[float, Unbounded]


@dataclass(frozen=True)
class Leg:
    """One component of a position."""
    instrument_type: str            # "call", "put" or "stock"
    side: str                       # "buy" or "sell"
    strike: Optional[float] = None  # None for stock
    expiry: Optional[str] = None    # ISO date, None for stock
    quantity: int = 1               # Always positive
    price: Optional[float] = None   # Per-share / per-contract fill, informational

    @property
    def is_option(self) -> bool:
        return self.instrument_type in ("call", "put")


@dataclass(frozen=True)
class TradeInput:
    """Legs plus the net entry price and size that the risk engine consumes."""
    ticker: str
    legs: Tuple[Leg, ...]
    entry_price: float              # Positive = net debit, negative = net credit
    quantity: int


@dataclass(frozen=True)
class Metrics:
    """Risk metrics for a position. Every field is optional."""
    max_risk: Optional[Bound] = None
    max_reward: Optional[Bound] = None
    risk_reward: Optional[float] = None
    breakeven: Tuple[float, ...] = ()
    probability_of_profit: Optional[float] = None


@dataclass(frozen=True)
class AssessmentFactors:
    """The metric values an assessment was derived from."""
    risk_reward: Optional[float] = None
    probability_of_profit: Optional[float] = None
    max_risk: Optional[Bound] = None
    max_reward: Optional[Bound] = None


@dataclass(frozen=True)
class Assessment:
    text: str
    risk_level: str                 # "low", "medium", "high", "unknown"
    factors: AssessmentFactors = field(default_factory=AssessmentFactors)
