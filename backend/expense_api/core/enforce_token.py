"""Token Enforcement — pure check of the "Month DD, YYYY" authorization token.

Invariants:
    - is_valid_token is PURE: no clock, no registry, any real calendar date passes
    - Month name is the full English name, matched case-insensitively
    - Day is exactly two digits, year exactly four digits
"""

import calendar
import re
from datetime import date


TOKEN_LAYOUT: str = "January 02, 2006"

_TOKEN_PATTERN = re.compile(r"^([A-Za-z]+) (\d{2}), (\d{4})$")
_MONTHS: dict[str, int] = {
    name.lower(): number
    for number, name in enumerate(calendar.month_name)
    if name
}


def parse_token_date(token: str) -> date | None:
    """Return the date encoded in token, or None if it does not parse."""
    match = _TOKEN_PATTERN.match(token)
    if not match:
        return None
    month_name, day, year = match.groups()
    month = _MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def is_valid_token(token: str | None) -> bool:
    """Rule: the Authorization header must be a parseable date."""
    if not token:
        return False
    return parse_token_date(token) is not None
