"""Adapters that bridge parsed confirmations to the risk engine's Leg type."""

from typing import Optional

from .confirmation_parser import ParsedTrade
from .risk_engine import Leg, TradeInput


def parsed_trade_to_input(parsed: ParsedTrade) -> Optional[TradeInput]:
    """Convert a ParsedTrade into a single-leg TradeInput.

    Returns None when the record cannot describe an open position: no
    ticker, no instrument type, an option without a strike, or an
    expiration notice.

    Sells are booked as a net credit (negative entry price), buys as a net
    debit. Quantity falls back to 1 when no contract count was parsed.
    """
    if parsed.action == "expired":
        return None
    if not parsed.ticker or not parsed.instrument_type:
        return None

    is_stock = parsed.instrument_type == "stock"
    if not is_stock and parsed.strike is None:
        return None

    side = "sell" if parsed.action == "sell" else "buy"
    quantity = parsed.contracts or 1
    entry_price = abs(parsed.price) if parsed.price else 0.0
    if side == "sell" and entry_price:
        entry_price = -entry_price

    leg = Leg(
        instrument_type=parsed.instrument_type,
        side=side,
        strike=None if is_stock else parsed.strike,
        expiry=None if is_stock else parsed.expiry,
        quantity=quantity,
        price=parsed.price,
    )

    return TradeInput(
        ticker=parsed.ticker,
        legs=(leg,),
        entry_price=entry_price,
        quantity=quantity,
    )
