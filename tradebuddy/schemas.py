"""Pydantic request/response models for the TradeBuddy API."""

from datetime import date
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from tradebuddy.pipeline.confirmation_parser import ParsedTrade
from tradebuddy.pipeline.risk_engine import (
    UNBOUNDED,
    Assessment,
    Leg,
    Metrics,
    TradeInput,
    Unbounded,
    risk_level_color,
)

BoundValue = Union[float, Literal["unbounded"]]


def _bound_out(value):
    if isinstance(value, Unbounded):
        return value.value
    return value


def _bound_in(value):
    if value == UNBOUNDED.value:
        return UNBOUNDED
    return value


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class ParseRequest(BaseModel):
    text: str


class LegModel(BaseModel):
    instrument_type: Literal["call", "put", "stock"]
    side: Literal["buy", "sell"]
    strike: Optional[float] = Field(default=None, gt=0)
    expiry: Optional[date] = None
    quantity: int = Field(default=1, gt=0)
    price: Optional[float] = None

    def to_leg(self) -> Leg:
        return Leg(
            instrument_type=self.instrument_type,
            side=self.side,
            strike=self.strike,
            expiry=self.expiry.isoformat() if self.expiry else None,
            quantity=self.quantity,
            price=self.price,
        )

    @classmethod
    def from_leg(cls, leg: Leg) -> "LegModel":
        return cls(
            instrument_type=leg.instrument_type,
            side=leg.side,
            strike=leg.strike,
            expiry=date.fromisoformat(leg.expiry) if leg.expiry else None,
            quantity=leg.quantity,
            price=leg.price,
        )


class MarketContext(BaseModel):
    current_price: Optional[float] = Field(default=None, gt=0)
    implied_volatility: Optional[float] = Field(default=None, gt=0)
    days_to_expiry: Optional[int] = Field(default=None, ge=0)


class MetricsRequest(MarketContext):
    legs: List[LegModel]
    entry_price: float
    quantity: int = Field(ge=0)


class AnalyzeRequest(MarketContext):
    text: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class ParsedTradeModel(BaseModel):
    action: Optional[str] = None
    open_close: Optional[str] = None
    instrument_type: Optional[str] = None
    ticker: Optional[str] = None
    expiry: Optional[str] = None
    strike: Optional[float] = None
    contracts: Optional[int] = None
    contract_size: int = 100
    amount: Optional[float] = None
    amount_sign: Optional[str] = None
    price: Optional[float] = None
    commission: Optional[float] = None
    fees: Optional[float] = None
    date: Optional[str] = None
    settlement_date: Optional[str] = None
    symbol_code: Optional[str] = None
    margin: bool = False
    account_suffix: Optional[str] = None
    is_empty: bool = False

    @classmethod
    def from_parsed(cls, parsed: ParsedTrade) -> "ParsedTradeModel":
        return cls(**parsed.to_dict(), is_empty=parsed.is_empty)


class ParseResponse(BaseModel):
    trades: List[ParsedTradeModel]
    count: int


class MetricsModel(BaseModel):
    max_risk: Optional[BoundValue] = None
    max_reward: Optional[BoundValue] = None
    risk_reward: Optional[float] = None
    breakeven: List[float] = Field(default_factory=list)
    probability_of_profit: Optional[float] = None

    @classmethod
    def from_metrics(cls, metrics: Metrics) -> "MetricsModel":
        return cls(
            max_risk=_bound_out(metrics.max_risk),
            max_reward=_bound_out(metrics.max_reward),
            risk_reward=metrics.risk_reward,
            breakeven=list(metrics.breakeven),
            probability_of_profit=metrics.probability_of_profit,
        )

    def to_metrics(self) -> Metrics:
        return Metrics(
            max_risk=_bound_in(self.max_risk),
            max_reward=_bound_in(self.max_reward),
            risk_reward=self.risk_reward,
            breakeven=tuple(self.breakeven),
            probability_of_profit=self.probability_of_profit,
        )


class AssessmentRequest(BaseModel):
    metrics: MetricsModel


class AssessmentFactorsModel(BaseModel):
    risk_reward: Optional[float] = None
    probability_of_profit: Optional[float] = None
    max_risk: Optional[BoundValue] = None
    max_reward: Optional[BoundValue] = None


class AssessmentModel(BaseModel):
    text: str
    risk_level: Literal["low", "medium", "high", "unknown"]
    color: str
    factors: AssessmentFactorsModel

    @classmethod
    def from_assessment(cls, assessment: Assessment) -> "AssessmentModel":
        f = assessment.factors
        return cls(
            text=assessment.text,
            risk_level=assessment.risk_level,
            color=risk_level_color(assessment.risk_level),
            factors=AssessmentFactorsModel(
                risk_reward=f.risk_reward,
                probability_of_profit=f.probability_of_profit,
                max_risk=_bound_out(f.max_risk),
                max_reward=_bound_out(f.max_reward),
            ),
        )


class TradeInputModel(BaseModel):
    ticker: str
    legs: List[LegModel]
    entry_price: float
    quantity: int

    @classmethod
    def from_trade_input(cls, trade: TradeInput) -> "TradeInputModel":
        return cls(
            ticker=trade.ticker,
            legs=[LegModel.from_leg(leg) for leg in trade.legs],
            entry_price=trade.entry_price,
            quantity=trade.quantity,
        )


class AnalyzedTrade(BaseModel):
    parsed: ParsedTradeModel
    trade: Optional[TradeInputModel] = None
    metrics: Optional[MetricsModel] = None
    assessment: Optional[AssessmentModel] = None


class AnalyzeResponse(BaseModel):
    results: List[AnalyzedTrade]
    count: int
