"""Data types for the confirmation parser."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

DEFAULT_CONTRACT_SIZE = 100

# Fields that carry a default even when nothing was extracted
_DEFAULTED_FIELDS = {"contract_size", "margin"}


@dataclass(frozen=True)
class ParsedTrade:
    """A normalized trade record extracted from one confirmation block."""
    action: Optional[str] = None            # "buy", "sell", "expired"
    open_close: Optional[str] = None        # "open", "close"
    instrument_type: Optional[str] = None   # "call", "put", "stock"
    ticker: Optional[str] = None
    expiry: Optional[str] = None            # ISO YYYY-MM-DD
    strike: Optional[float] = None
    contracts: Optional[int] = None         # Always non-negative
    contract_size: int = DEFAULT_CONTRACT_SIZE
    amount: Optional[float] = None
    amount_sign: Optional[str] = None       # "+" or "-"
    price: Optional[float] = None
    commission: Optional[float] = None
    fees: Optional[float] = None
    date: Optional[str] = None              # ISO YYYY-MM-DD
    settlement_date: Optional[str] = None   # ISO YYYY-MM-DD
    symbol_code: Optional[str] = None       # e.g. "-IREN260116P45"
    margin: bool = False
    account_suffix: Optional[str] = None    # e.g. "***1234"

    @property
    def is_empty(self) -> bool:
        """True when nothing at all could be extracted from the block."""
        for f in fields(self):
            if f.name in _DEFAULTED_FIELDS:
                continue
            if getattr(self, f.name) is not None:
                return False
        return not self.margin and self.contract_size == DEFAULT_CONTRACT_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
