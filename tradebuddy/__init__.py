"""TradeBuddy: broker confirmation parsing and trade risk assessment."""

from tradebuddy.pipeline.confirmation_parser import ParsedTrade, parse
from tradebuddy.pipeline.risk_engine import (
    UNBOUNDED,
    Assessment,
    Leg,
    Metrics,
    compute_metrics,
    generate_assessment,
)
from tradebuddy.pipeline.adapters import parsed_trade_to_input

__version__ = "1.0.0"

__all__ = [
    "parse",
    "compute_metrics",
    "generate_assessment",
    "parsed_trade_to_input",
    "ParsedTrade",
    "Leg",
    "Metrics",
    "Assessment",
    "UNBOUNDED",
]
