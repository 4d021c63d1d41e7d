"""Field extractors for broker confirmation text.

Each extractor is a pure function over a single block of text and returns a
partial field dict keyed by ParsedTrade attribute names. Missing information
is simply left out of the dict; extractors never raise on malformed input.
"""

import re
from typing import Any, Dict, Optional

from .dates import month_number, parse_date_like, to_iso

Fields = Dict[str, Any]

# -IREN260116P45, +SPY250321C550
SYMBOL_CODE_RE = re.compile(r"([+-]?)([A-Z]{1,6})(\d{2})(\d{2})(\d{2})([CP])(\d{2,6})(?!\d)")

DESC_TICKER_RE = re.compile(r"\(([A-Z]{1,6})\)")
DESC_TYPE_RE = re.compile(r"\b(PUT|CALL)\b", re.IGNORECASE)
DESC_EXPIRY_RE = re.compile(
    r"(JAN|FEB|MAR|APR|MAY|JUN|JUL|AUG|SEP|OCT|NOV|DEC)\s+(\d{1,2})\s+(\d{2,4})\b",
    re.IGNORECASE,
)
DESC_STRIKE_RE = re.compile(r"\$(\d+(?:\.\d{1,2})?)")
DESC_SIZE_RE = re.compile(r"\((\d{1,6})\s*SHS\)", re.IGNORECASE)
MARGIN_MARKER_RE = re.compile(r"\(Margin\)", re.IGNORECASE)

ACTION_RE = re.compile(r"YOU\s+(BOUGHT|SOLD)\s+(OPENING|CLOSING)\s+TRANSACTION", re.IGNORECASE)
EXPIRED_RE = re.compile(r"\bEXPIRED\b", re.IGNORECASE)
AS_OF_RE = re.compile(r"\bas\s+of\s+", re.IGNORECASE)

SIGNED_AMOUNT_RE = re.compile(r"([+-])\$\s*(\d{1,3}(?:,\d{3})*(?:\.\d{2})?)")
MONEY_RE = re.compile(r"^\$?\s*(\d+(?:,\d{3})*(?:\.\d{1,4})?)")
# At most 7 integer digits; longer runs do not match
CONTRACTS_RE = re.compile(r"^[+-]?(\d{1,7})(?:\.\d+)?(?!\d)")
PLAIN_TICKER_RE = re.compile(r"^[A-Z]{1,6}$")
ACCOUNT_RE = re.compile(r"\*{3}(\d{3,4})(?!\d)")

LABELS = (
    "date",
    "symbol",
    "symbol description",
    "type",
    "contracts",
    "price",
    "commission",
    "fees",
    "amount",
    "settlement date",
)


def _money(value: str) -> Optional[float]:
    m = MONEY_RE.match(value.strip())
    if not m:
        return None
    return float(m.group(1).replace(",", ""))


# ---------------------------------------------------------------------------
# Option symbol code
# ---------------------------------------------------------------------------

def extract_symbol_code(text: str) -> Fields:
    """Decode an option symbol token such as ``-IREN260116P45``."""
    m = SYMBOL_CODE_RE.search(text)
    if not m:
        return {}
    sign, ticker, yy, mm, dd, cp, strike_raw = m.groups()
    out: Fields = {
        "symbol_code": f"{sign}{ticker}{yy}{mm}{dd}{cp}{strike_raw}",
        "ticker": ticker,
        "instrument_type": "call" if cp == "C" else "put",
    }
    strike = float(int(strike_raw))
    if strike > 0:
        out["strike"] = strike
    expiry = to_iso(int(yy), int(mm), int(dd))
    if expiry:
        out["expiry"] = expiry
    return out


# ---------------------------------------------------------------------------
# Description line: PUT (IREN) ... JAN 16 26 $45 (100 SHS) (Margin)
# ---------------------------------------------------------------------------

def extract_description(text: str) -> Fields:
    out: Fields = {}

    m = DESC_TICKER_RE.search(text)
    if m:
        out["ticker"] = m.group(1)

    m = DESC_TYPE_RE.search(text)
    if m:
        out["instrument_type"] = m.group(1).lower()

    m = DESC_EXPIRY_RE.search(text)
    if m:
        month = month_number(m.group(1))
        expiry = to_iso(int(m.group(3)), month, int(m.group(2))) if month else None
        if expiry:
            out["expiry"] = expiry

    m = DESC_STRIKE_RE.search(text)
    if m:
        strike = float(m.group(1))
        if strike > 0:
            out["strike"] = strike

    m = DESC_SIZE_RE.search(text)
    if m:
        out["contract_size"] = int(m.group(1))

    if MARGIN_MARKER_RE.search(text):
        out["margin"] = True

    return out


# ---------------------------------------------------------------------------
# Action / open-close phrase
# ---------------------------------------------------------------------------

def extract_action(text: str) -> Fields:
    m = ACTION_RE.search(text)
    if not m:
        return {}
    return {
        "action": "buy" if m.group(1).upper() == "BOUGHT" else "sell",
        "open_close": "open" if m.group(2).upper() == "OPENING" else "close",
    }


# ---------------------------------------------------------------------------
# Expiration notice
# ---------------------------------------------------------------------------

def extract_expiration(text: str) -> Fields:
    """Recognize an ``EXPIRED`` notice.

    The notice date comes from an ``as of <date>`` token when present,
    otherwise from the first date-like token in the text.
    """
    if not EXPIRED_RE.search(text):
        return {}

    out: Fields = {"action": "expired", "contracts": 1}

    notice_date = None
    m = AS_OF_RE.search(text)
    if m:
        notice_date = parse_date_like(text[m.end():m.end() + 16])
    if notice_date is None:
        notice_date = parse_date_like(text)
    if notice_date:
        out["date"] = notice_date
    return out


# ---------------------------------------------------------------------------
# Labeled block: "<Label>\n<Value>"
# ---------------------------------------------------------------------------

def read_labels(text: str) -> Dict[str, str]:
    """Collect ``label -> value`` pairs where a label sits alone on a line.

    The value is the next non-blank line. First occurrence of a label wins.
    """
    lines = [line.strip() for line in text.splitlines()]
    labels: Dict[str, str] = {}
    for i, line in enumerate(lines):
        key = line.lower()
        if key not in LABELS or key in labels:
            continue
        for value in lines[i + 1:]:
            if value:
                if value.lower() not in LABELS:
                    labels[key] = value
                break
    return labels


def extract_labeled_block(text: str) -> Fields:
    labels = read_labels(text)
    out: Fields = {}

    if "date" in labels:
        value = parse_date_like(labels["date"])
        if value:
            out["date"] = value

    if "settlement date" in labels:
        value = parse_date_like(labels["settlement date"])
        if value:
            out["settlement_date"] = value

    if "contracts" in labels:
        m = CONTRACTS_RE.match(labels["contracts"])
        if m:
            out["contracts"] = int(m.group(1))

    for label in ("price", "commission", "fees", "amount"):
        if label in labels:
            value = _money(labels[label])
            if value is not None:
                out[label] = value

    if labels.get("type", "").lower() == "margin":
        out["margin"] = True

    symbol = labels.get("symbol", "")
    if PLAIN_TICKER_RE.match(symbol):
        out["ticker"] = symbol
        out["instrument_type"] = "stock"

    return out


# ---------------------------------------------------------------------------
# Inline tokens
# ---------------------------------------------------------------------------

def extract_signed_amount(text: str) -> Fields:
    """Signed cash amount such as ``+$107.33`` or ``-$1,204.50``."""
    m = SIGNED_AMOUNT_RE.search(text)
    if not m:
        return {}
    return {
        "amount": float(m.group(2).replace(",", "")),
        "amount_sign": m.group(1),
    }


def extract_account(text: str) -> Fields:
    m = ACCOUNT_RE.search(text)
    if not m:
        return {}
    return {"account_suffix": m.group(0)}
