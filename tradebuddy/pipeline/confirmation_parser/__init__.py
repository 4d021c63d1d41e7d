"""Confirmation Parser: broker confirmation text to normalized trade records.

Public API:
    parse(text) -> List[ParsedTrade]
"""

from .parser import parse, parse_block, split_blocks
from .dates import parse_date_like
from .types import ParsedTrade, DEFAULT_CONTRACT_SIZE

__all__ = ["parse", "parse_block", "split_blocks", "parse_date_like", "ParsedTrade", "DEFAULT_CONTRACT_SIZE"]
