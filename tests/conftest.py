"""
Shared pytest fixtures and factory helpers for TradeBuddy tests.

Everything under test is pure, so fixtures only provide sample confirmation
text, leg builders and an HTTP client for the API layer.
"""

import pytest
from fastapi.testclient import TestClient

from tradebuddy.pipeline.risk_engine import Leg


# ---------------------------------------------------------------------------
# Sample confirmations
# ---------------------------------------------------------------------------

EXPIRED_NOTICE = "EXPIRED PUT (IREN) IREN LIMITED COM NPVJAN 16 26 $45 as of Jan-16-2026"

DESCRIPTION_LINE = "PUT (IREN) IREN LIMITED COM NPV JAN 16 26 $45 (100 SHS) (Margin)"

PROCESSING_BLOCK = (
    "Processing\n"
    "Date\n"
    "Jan-20-2026\n"
    "Symbol\n"
    "-IREN260116P45\n"
    "Symbol description\n"
    "PUT (IREN) IREN LIMITED COM NPV JAN 16 26 $45 (100 SHS)\n"
    "Type\n"
    "Margin\n"
    "Contracts\n"
    "+2.000\n"
    "YOU SOLD OPENING TRANSACTION PUT (IREN) IREN LIMITED COM NPVJAN 09 26 $43 (100 SHS) (Margin)\n"
    "+$107.33\n"
    "$10,590.38"
)

DETAILED_TICKET = (
    "Date\n"
    "Jan-05-2026\n"
    "Symbol\n"
    "-IREN260109P43\n"
    "Symbol description\n"
    "PUT (IREN) IREN LIMITED COM NPVJAN 09 26 $43 (100 SHS)\n"
    "Type\n"
    "Margin\n"
    "Contracts\n"
    "-1.000\n"
    "Price\n"
    "$1.08\n"
    "Commission\n"
    "$0.65\n"
    "Fees\n"
    "$0.02\n"
    "Amount\n"
    "$107.33\n"
    "Settlement date\n"
    "Jan-06-2026"
)


@pytest.fixture
def expired_notice():
    return EXPIRED_NOTICE


@pytest.fixture
def description_line():
    return DESCRIPTION_LINE


@pytest.fixture
def processing_block():
    return PROCESSING_BLOCK


@pytest.fixture
def detailed_ticket():
    return DETAILED_TICKET


@pytest.fixture
def client():
    from app import app
    return TestClient(app)


# ---------------------------------------------------------------------------
# Leg factory helpers
# ---------------------------------------------------------------------------

def make_option_leg(
    *,
    instrument_type="call",
    side="buy",
    strike=100.0,
    expiry="2026-03-20",
    quantity=1,
    price=None,
):
    """Build an option Leg with sensible defaults."""
    return Leg(
        instrument_type=instrument_type,
        side=side,
        strike=strike,
        expiry=expiry,
        quantity=quantity,
        price=price,
    )


def make_stock_leg(*, side="buy", quantity=100, price=None):
    """Build a stock Leg."""
    return Leg(
        instrument_type="stock",
        side=side,
        strike=None,
        expiry=None,
        quantity=quantity,
        price=price,
    )
