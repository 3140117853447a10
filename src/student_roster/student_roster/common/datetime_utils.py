from __future__ import annotations

import re
from datetime import date, datetime

from ..core.constants import DATE_FORMAT, DATE_PATTERN

_DATE_RE = re.compile(DATE_PATTERN)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def is_valid_date(value) -> bool:
    """True iff value is a real calendar date written exactly as YYYY-MM-DD."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()


def today_str() -> str:
    return format_date(now_local().date())
