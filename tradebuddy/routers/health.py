"""Liveness and version routes."""

from datetime import datetime

from fastapi import APIRouter

from tradebuddy import __version__
from tradebuddy.pipeline.confirmation_parser import parse

router = APIRouter()

# Parsed on every /health call to prove the regex tables loaded
_SELF_CHECK_TEXT = "-SPY250321C550"


@router.get("/api/health")
async def health_check():
    """Liveness probe for the UI"""
    return {"status": "ok", "service": "TradeBuddy"}


@router.get("/health")
async def health_detail():
    """Liveness plus version and a parser self-check"""
    [probe] = parse(_SELF_CHECK_TEXT)
    return {
        "status": "healthy" if probe.ticker == "SPY" else "degraded",
        "version": __version__,
        "timestamp": datetime.now().isoformat(),
    }
