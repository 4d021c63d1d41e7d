"""Multipliers, thresholds and assessment wording."""

OPTION_MULTIPLIER = 100
STOCK_MULTIPLIER = 1
DAYS_PER_YEAR = 365

CAPITAL_WARNING_THRESHOLD = 5000.0

RISK_LEVEL_COLORS: dict[str, str] = {
    "low":     "green",
    "medium":  "yellow",
    "high":    "red",
    "unknown": "gray",
}

# -- Assessment messages, in decision-table order --
MSG_INSUFFICIENT_DATA = "Insufficient data for assessment. Please review trade parameters."
MSG_RR_UNAVAILABLE = "Unable to calculate risk/reward ratio. Review trade structure."
MSG_RISK_HEAVY = (
    "Risk-heavy trade with high potential reward but lower probability of success. "
    "Consider sizing down or adjusting position."
)
MSG_BALANCED = (
    "Balanced trade with moderate risk/reward and probability. "
    "Monitor breakeven distance and manage position size appropriately."
)
MSG_FAVORABLE = (
    "Favorable risk/reward profile with high probability of success. "
    "Low risk relative to potential reward."
)
MSG_HIGH_PROBABILITY = (
    "High probability trade. While success is more likely, ensure reward justifies "
    "the position size and capital commitment."
)
MSG_LOW_PROBABILITY = (
    "Low probability trade. Consider if the potential reward justifies the risk, "
    "and size accordingly."
)
MSG_EXCELLENT_RR = (
    "Excellent risk/reward ratio. Potential reward significantly exceeds risk. "
    "Ensure probability supports the trade thesis."
)
MSG_LIMITED_REWARD = (
    "Limited reward relative to risk. Evaluate if this trade aligns with your "
    "strategy and risk tolerance."
)
MSG_NORMAL_RANGES = (
    "Trade parameters are within normal ranges. Review all metrics and ensure "
    "alignment with your trading plan."
)

# -- Appended warnings --
WARN_CAPITAL = "Note: Maximum risk exceeds $5,000. Ensure this fits your risk management rules."
WARN_POP_UNAVAILABLE = (
    "POP estimate unavailable - limited market data. "
    "Use caution when evaluating probability."
)
