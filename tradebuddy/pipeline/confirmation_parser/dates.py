"""Month-name date tokens used across broker confirmations."""

import re
from datetime import date
from typing import Optional

MONTHS: dict[str, int] = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

_MONTH_ALT = "|".join(MONTHS)

# Jan-12-2026, Jan 12 26, JAN 16 26
DATE_LIKE_RE = re.compile(
    rf"({_MONTH_ALT})[ -]?(\d{{1,2}})[ -]?(\d{{4}}|\d{{2}})",
    re.IGNORECASE,
)


def to_iso(year: int, month: int, day: int) -> Optional[str]:
    """Build an ISO date string, or None when the date does not exist."""
    if year < 100:
        year += 2000
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def month_number(token: str) -> Optional[int]:
    return MONTHS.get(token.strip()[:3].upper())


def parse_date_like(text: str) -> Optional[str]:
    """Normalize the first month-name date token in text to ISO form."""
    m = DATE_LIKE_RE.search(text)
    if not m:
        return None
    month = month_number(m.group(1))
    if month is None:
        return None
    return to_iso(int(m.group(3)), month, int(m.group(2)))
