"""Risk metric calculations for option and stock positions.

All figures are approximations for journaling purposes. Conventions:

- ``entry_price`` is the net price per share: positive for a net debit,
  negative for a net credit.
- Naked single legs have no finite cap on one side; that side is reported as
  ``UNBOUNDED`` instead of a float so it cannot leak into arithmetic.
- Nothing here raises on degenerate input. Zero or missing figures collapse
  to 0 / None as documented per function.
"""

import logging
import math
from datetime import date
from typing import List, Optional, Sequence

from .constants import DAYS_PER_YEAR, OPTION_MULTIPLIER, STOCK_MULTIPLIER
from .stats import normal_cdf
from .types import UNBOUNDED, Bound, Leg, Metrics, Unbounded

logger = logging.getLogger(__name__)

__all__ = [
    "leg_shape",
    "calculate_max_risk",
    "calculate_max_reward",
    "calculate_risk_reward",
    "calculate_breakeven",
    "profit_direction",
    "estimate_pop",
    "days_to_expiry",
    "compute_metrics",
]


# ---------------------------------------------------------------------------
# Shape detection
# ---------------------------------------------------------------------------

def _is_vertical(legs: Sequence[Leg]) -> bool:
    """Two option legs of the same type, both struck, opposite sides."""
    if len(legs) != 2:
        return False
    a, b = legs
    return (
        a.instrument_type == b.instrument_type
        and a.is_option
        and a.strike is not None
        and b.strike is not None
        and a.side != b.side
    )


def leg_shape(legs: Sequence[Leg]) -> str:
    """Classify a leg set as "empty", "single", "vertical" or "other"."""
    if not legs:
        return "empty"
    if len(legs) == 1:
        return "single"
    if _is_vertical(legs):
        return "vertical"
    return "other"


def _multiplier(leg: Leg) -> int:
    return STOCK_MULTIPLIER if leg.instrument_type == "stock" else OPTION_MULTIPLIER


def _strike_width(legs: Sequence[Leg]) -> float:
    a, b = legs
    return abs(a.strike - b.strike) * OPTION_MULTIPLIER


# ---------------------------------------------------------------------------
# Max risk / max reward
# ---------------------------------------------------------------------------

def calculate_max_risk(legs: Sequence[Leg], entry_price: float, quantity: int) -> Bound:
    """Maximum potential loss in dollars.

    Single buy: premium paid. Single sell: UNBOUNDED.
    Vertical: width minus credit (credit), premium paid (debit).
    Anything else: the net debit, or 0 for a net credit.
    """
    shape = leg_shape(legs)
    if shape == "empty" or quantity == 0:
        return 0.0

    premium = abs(entry_price)

    if shape == "single":
        leg = legs[0]
        if leg.side == "buy":
            return premium * quantity * _multiplier(leg)
        return UNBOUNDED

    if shape == "vertical":
        if entry_price < 0:
            return max(0.0, (_strike_width(legs) - premium * OPTION_MULTIPLIER) * quantity)
        return premium * quantity * OPTION_MULTIPLIER

    if entry_price > 0:
        return entry_price * quantity * OPTION_MULTIPLIER
    return 0.0


def calculate_max_reward(legs: Sequence[Leg], entry_price: float, quantity: int) -> Bound:
    """Maximum potential profit in dollars.

    Single sell: premium received. Single buy: UNBOUNDED.
    Vertical: credit received (credit), width minus debit (debit).
    Anything else: the net credit, or 0 for a net debit.
    """
    shape = leg_shape(legs)
    if shape == "empty" or quantity == 0:
        return 0.0

    premium = abs(entry_price)

    if shape == "single":
        leg = legs[0]
        if leg.side == "sell":
            return premium * quantity * _multiplier(leg)
        return UNBOUNDED

    if shape == "vertical":
        if entry_price < 0:
            return premium * quantity * OPTION_MULTIPLIER
        return max(0.0, (_strike_width(legs) - premium * OPTION_MULTIPLIER) * quantity)

    if entry_price < 0:
        return premium * quantity * OPTION_MULTIPLIER
    return 0.0


def _finite(value: Optional[Bound]) -> Optional[float]:
    if value is None or isinstance(value, Unbounded):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def calculate_risk_reward(max_risk: Optional[Bound], max_reward: Optional[Bound]) -> float:
    """Reward-to-risk ratio; 0 whenever either side is zero, missing or unbounded."""
    risk = _finite(max_risk)
    reward = _finite(max_reward)
    if risk is None or reward is None or risk <= 0:
        return 0.0
    return reward / risk


# ---------------------------------------------------------------------------
# Breakeven
# ---------------------------------------------------------------------------

def calculate_breakeven(legs: Sequence[Leg], entry_price: float) -> List[float]:
    """Breakeven price(s) at expiry.

    Single option: call strike + premium (buy) / - premium (sell); puts mirror.
    Vertical: long strike for a debit, short strike for a credit, moved up by
    the premium for calls and down for puts. Other shapes: no breakeven.
    """
    shape = leg_shape(legs)
    premium = abs(entry_price)

    if shape == "single":
        leg = legs[0]
        if not leg.is_option or leg.strike is None:
            return []
        signed = premium if leg.side == "buy" else -premium
        if leg.instrument_type == "call":
            return [leg.strike + signed]
        return [leg.strike - signed]

    if shape == "vertical":
        long_leg = next(l for l in legs if l.side == "buy")
        short_leg = next(l for l in legs if l.side == "sell")
        anchor = long_leg.strike if entry_price > 0 else short_leg.strike
        if long_leg.instrument_type == "call":
            return [anchor + premium]
        return [anchor - premium]

    return []


def profit_direction(legs: Sequence[Leg], entry_price: float) -> Optional[str]:
    """Which side of a single breakeven is profitable: "above", "below" or None."""
    shape = leg_shape(legs)

    if shape == "single":
        leg = legs[0]
        if not leg.is_option:
            return None
        bullish = (leg.instrument_type == "call") == (leg.side == "buy")
        return "above" if bullish else "below"

    if shape == "vertical":
        is_call = legs[0].instrument_type == "call"
        is_debit = entry_price > 0
        # Call debit and put credit spreads are bullish
        return "above" if is_call == is_debit else "below"

    return None


# ---------------------------------------------------------------------------
# Probability of profit
# ---------------------------------------------------------------------------

def estimate_pop(
    breakeven: Sequence[float],
    current_price: Optional[float] = None,
    implied_volatility: Optional[float] = None,
    days_to_expiry: Optional[int] = None,
    profit_above: Optional[bool] = None,
) -> Optional[float]:
    """Estimate probability of profit from a normal price distribution.

    The distribution is centered on ``current_price`` with standard deviation
    ``current_price * iv * sqrt(days / 365)``. With one breakeven the result is
    the mass on the profitable side: above it when ``profit_above`` is True,
    below it when False. When the side is unknown, a breakeven under the
    current price is read as "profit above" and one over it as "profit below".
    With two breakevens the result is the mass between them.

    Returns None when any market input is missing or ``days_to_expiry <= 0``.
    """
    if (
        not breakeven
        or current_price is None
        or implied_volatility is None
        or days_to_expiry is None
        or days_to_expiry <= 0
        or current_price <= 0
        or implied_volatility <= 0
    ):
        return None

    std_dev = current_price * implied_volatility * math.sqrt(days_to_expiry / DAYS_PER_YEAR)

    if len(breakeven) == 1:
        be = breakeven[0]
        z = (be - current_price) / std_dev
        if profit_above is None:
            profit_above = be < current_price
        pop = normal_cdf(-z) if profit_above else normal_cdf(z)
    elif len(breakeven) == 2:
        low, high = sorted(breakeven)
        z_low = (low - current_price) / std_dev
        z_high = (high - current_price) / std_dev
        pop = normal_cdf(z_high) - normal_cdf(z_low)
    else:
        return None

    return min(1.0, max(0.0, pop))


def days_to_expiry(expiry: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """Calendar days from ``today`` until an ISO expiry date (negative once past)."""
    if not expiry:
        return None
    try:
        expiration = date.fromisoformat(expiry)
    except ValueError:
        return None
    return (expiration - (today or date.today())).days


# ---------------------------------------------------------------------------
# All metrics
# ---------------------------------------------------------------------------

def compute_metrics(
    legs: Sequence[Leg],
    entry_price: float,
    quantity: int,
    current_price: Optional[float] = None,
    implied_volatility: Optional[float] = None,
    days_to_expiry: Optional[int] = None,
) -> Metrics:
    """Compute every risk metric for a position.

    An empty leg set or zero quantity yields zero risk, zero reward, a zero
    ratio, no breakeven and no probability estimate.
    """
    if not legs or quantity == 0:
        return Metrics(max_risk=0.0, max_reward=0.0, risk_reward=0.0)

    max_risk = calculate_max_risk(legs, entry_price, quantity)
    max_reward = calculate_max_reward(legs, entry_price, quantity)
    rr = calculate_risk_reward(max_risk, max_reward)
    breakeven = calculate_breakeven(legs, entry_price)

    direction = profit_direction(legs, entry_price)
    pop = estimate_pop(
        breakeven,
        current_price,
        implied_volatility,
        days_to_expiry,
        profit_above=None if direction is None else direction == "above",
    )

    logger.debug(
        f"Metrics for {leg_shape(legs)} position ({len(legs)} legs, entry={entry_price}, "
        f"qty={quantity}): risk={max_risk}, reward={max_reward}, rr={rr:.3f}, "
        f"breakeven={breakeven}, pop={pop}"
    )

    return Metrics(
        max_risk=max_risk,
        max_reward=max_reward,
        risk_reward=rr,
        breakeven=tuple(breakeven),
        probability_of_profit=pop,
    )
