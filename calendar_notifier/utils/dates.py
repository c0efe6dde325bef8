from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union

import pytz


COMPACT_DATE_FORMAT = "%Y%m%d"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def get_timezone(tz_name: str) -> pytz.BaseTzInfo:
    return pytz.timezone(tz_name)


def today_in(tz_name: str, now: Optional[datetime] = None) -> date:
    """Calendar date of `now` (default: the current instant) in `tz_name`."""
    tz = get_timezone(tz_name)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        now = tz.localize(now)
    return now.astimezone(tz).date()


def as_date(value: Union[date, datetime]) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def days_from(value: Union[date, datetime], days: int) -> date:
    return as_date(value) + timedelta(days=days)


def parse_compact_date(text: str) -> date:
    """Parse exactly eight ASCII digits as YYYYMMDD. Raises ValueError otherwise."""
    if len(text) != 8 or not (text.isascii() and text.isdigit()):
        raise ValueError(f"expected 8 digits, got {text!r}")
    return datetime.strptime(text, COMPACT_DATE_FORMAT).date()


def pretty_date(value: date) -> str:
    # Example: 15/01/2024
    return value.strftime(DISPLAY_DATE_FORMAT)
