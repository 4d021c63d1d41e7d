"""Parsing, risk metric and assessment routes."""

from fastapi import APIRouter, HTTPException
from loguru import logger

from tradebuddy.pipeline.adapters import parsed_trade_to_input
from tradebuddy.pipeline.confirmation_parser import parse
from tradebuddy.pipeline.risk_engine import compute_metrics, days_to_expiry, generate_assessment
from tradebuddy.schemas import (
    AnalyzedTrade,
    AnalyzeRequest,
    AnalyzeResponse,
    AssessmentModel,
    AssessmentRequest,
    MetricsModel,
    MetricsRequest,
    ParsedTradeModel,
    ParseRequest,
    ParseResponse,
    TradeInputModel,
)

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/parse", response_model=ParseResponse)
async def parse_confirmation(request: ParseRequest):
    """Parse pasted broker confirmation text into trade records"""
    trades = parse(request.text)
    unparsed = sum(1 for t in trades if t.is_empty)
    if unparsed:
        logger.warning(f"{unparsed} of {len(trades)} pasted block(s) had no recognizable fields")
    logger.info(f"Parsed {len(trades)} trade(s) from {len(request.text)} chars of pasted text")
    return ParseResponse(
        trades=[ParsedTradeModel.from_parsed(t) for t in trades],
        count=len(trades),
    )


@router.post("/metrics", response_model=MetricsModel)
async def get_metrics(request: MetricsRequest):
    """Compute risk metrics for a set of legs"""
    try:
        metrics = compute_metrics(
            [leg.to_leg() for leg in request.legs],
            request.entry_price,
            request.quantity,
            current_price=request.current_price,
            implied_volatility=request.implied_volatility,
            days_to_expiry=request.days_to_expiry,
        )
        return MetricsModel.from_metrics(metrics)
    except Exception as e:
        logger.error(f"Error computing metrics: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/assessment", response_model=AssessmentModel)
async def get_assessment(request: AssessmentRequest):
    """Generate the deterministic assessment for a metrics set"""
    assessment = generate_assessment(request.metrics.to_metrics())
    logger.info(f"Assessment risk level: {assessment.risk_level}")
    return AssessmentModel.from_assessment(assessment)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_confirmation(request: AnalyzeRequest):
    """Parse pasted text and run every actionable trade through the risk engine"""
    try:
        results = []
        for parsed in parse(request.text):
            trade = parsed_trade_to_input(parsed)
            if trade is None:
                logger.info(f"Parsed trade for {parsed.ticker or 'unknown ticker'} is not actionable; skipping metrics")
                results.append(AnalyzedTrade(parsed=ParsedTradeModel.from_parsed(parsed)))
                continue

            dte = request.days_to_expiry
            if dte is None:
                dte = days_to_expiry(parsed.expiry)

            metrics = compute_metrics(
                trade.legs,
                trade.entry_price,
                trade.quantity,
                current_price=request.current_price,
                implied_volatility=request.implied_volatility,
                days_to_expiry=dte,
            )
            assessment = generate_assessment(metrics)
            results.append(AnalyzedTrade(
                parsed=ParsedTradeModel.from_parsed(parsed),
                trade=TradeInputModel.from_trade_input(trade),
                metrics=MetricsModel.from_metrics(metrics),
                assessment=AssessmentModel.from_assessment(assessment),
            ))

        logger.info(f"Analyzed {len(results)} pasted trade(s)")
        return AnalyzeResponse(results=results, count=len(results))

    except Exception as e:
        logger.error(f"Error analyzing pasted text: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
