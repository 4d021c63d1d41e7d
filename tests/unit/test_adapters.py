"""Unit tests for ParsedTrade -> TradeInput conversion."""

from tradebuddy.pipeline.adapters import parsed_trade_to_input
from tradebuddy.pipeline.confirmation_parser import ParsedTrade, parse


class TestParsedTradeToInput:
    def test_sold_option_books_a_credit(self):
        parsed = ParsedTrade(
            action="sell", instrument_type="put", ticker="IREN",
            expiry="2026-01-16", strike=45.0, contracts=2, price=0.55,
        )
        trade = parsed_trade_to_input(parsed)
        assert trade.ticker == "IREN"
        assert trade.entry_price == -0.55
        assert trade.quantity == 2
        (leg,) = trade.legs
        assert leg.instrument_type == "put"
        assert leg.side == "sell"
        assert leg.strike == 45.0
        assert leg.expiry == "2026-01-16"
        assert leg.quantity == 2

    def test_missing_action_defaults_to_buy(self, detailed_ticket):
        [parsed] = parse(detailed_ticket)
        trade = parsed_trade_to_input(parsed)
        assert trade.legs[0].side == "buy"
        assert trade.entry_price == 1.08
        assert trade.quantity == 1

    def test_missing_price_is_zero(self, processing_block):
        [parsed] = parse(processing_block)
        trade = parsed_trade_to_input(parsed)
        assert trade.legs[0].side == "sell"
        assert trade.entry_price == 0.0
        assert trade.quantity == 2

    def test_missing_contracts_defaults_to_one(self):
        parsed = ParsedTrade(action="buy", instrument_type="call", ticker="SPY", strike=550.0)
        assert parsed_trade_to_input(parsed).quantity == 1

    def test_stock_leg_has_no_strike_or_expiry(self):
        [parsed] = parse("Symbol\nAAPL\nContracts\n10\nPrice\n$150.00")
        trade = parsed_trade_to_input(parsed)
        (leg,) = trade.legs
        assert leg.instrument_type == "stock"
        assert leg.strike is None
        assert leg.expiry is None
        assert trade.entry_price == 150.0
        assert trade.quantity == 10

    def test_expired_notice_is_not_actionable(self, expired_notice):
        [parsed] = parse(expired_notice)
        assert parsed_trade_to_input(parsed) is None

    def test_empty_record_is_not_actionable(self):
        assert parsed_trade_to_input(ParsedTrade()) is None

    def test_option_without_strike_is_not_actionable(self):
        parsed = ParsedTrade(action="buy", instrument_type="call", ticker="SPY")
        assert parsed_trade_to_input(parsed) is None

    def test_missing_ticker_is_not_actionable(self):
        parsed = ParsedTrade(action="buy", instrument_type="call", strike=100.0)
        assert parsed_trade_to_input(parsed) is None
