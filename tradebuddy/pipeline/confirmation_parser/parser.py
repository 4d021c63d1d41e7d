"""Confirmation parser entry point.

Stateless: raw pasted text in, ParsedTrade records out. Field precedence is
expressed by the order partial results are merged, not by control flow:

    action phrase > symbol code > description line > signed amount
    > labeled block > account suffix > expiration defaults
"""

import logging
import re
from typing import Any, Dict, List

from .extractors import (
    extract_account,
    extract_action,
    extract_description,
    extract_expiration,
    extract_labeled_block,
    extract_signed_amount,
    extract_symbol_code,
)
from .types import ParsedTrade

logger = logging.getLogger(__name__)

__all__ = ["parse", "parse_block", "split_blocks"]

# A line made only of ---, ===, ___ or *** separates pasted confirmations
SEPARATOR_RE = re.compile(r"^[ \t]*[-=_*]{3,}[ \t]*$", re.MULTILINE)


def split_blocks(text: str) -> List[str]:
    """Split normalized text into non-empty confirmation blocks."""
    return [blk.strip() for blk in SEPARATOR_RE.split(text) if blk.strip()]


def _merge(*partials: Dict[str, Any]) -> Dict[str, Any]:
    """First partial to supply a field wins."""
    merged: Dict[str, Any] = {}
    for partial in partials:
        for key, value in partial.items():
            merged.setdefault(key, value)
    return merged


def parse_block(block: str) -> ParsedTrade:
    """Parse a single confirmation block into one ParsedTrade."""
    expiration = extract_expiration(block)

    merged = _merge(
        extract_action(block),
        extract_symbol_code(block),
        extract_description(block),
        extract_signed_amount(block),
        extract_labeled_block(block),
        extract_account(block),
        expiration,
    )

    if expiration:
        # Expiration notices carry no open/close direction
        merged["action"] = "expired"
        merged.pop("open_close", None)
        if merged.get("date") is None:
            merged["date"] = merged.get("expiry")

    return ParsedTrade(**merged)


def parse(raw_text: str) -> List[ParsedTrade]:
    """Parse pasted broker confirmation text.

    Returns one ParsedTrade per block, in input order. Empty or
    whitespace-only input returns an empty list. Never raises: fields that
    could not be recognized are left as None.
    """
    text = (raw_text or "").replace("\u00a0", " ").strip()
    if not text:
        return []

    # Separator-only text still yields one (empty) record
    blocks = split_blocks(text) or [text]
    trades = [parse_block(blk) for blk in blocks]

    logger.debug(
        f"Parsed {len(trades)} block(s); "
        f"{sum(1 for t in trades if t.is_empty)} without recognizable fields"
    )
    return trades
