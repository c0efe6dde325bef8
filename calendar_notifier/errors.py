from __future__ import annotations

from typing import Optional


class CalendarNotifierError(Exception):
    """Base class for calendar-notifier errors."""


class FetchError(CalendarNotifierError):
    """The calendar server could not be queried. Fatal for the run."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EventParseError(CalendarNotifierError):
    """A single event block did not have the expected shape."""

    def __init__(self, message: str, raw_value: str = ""):
        super().__init__(message)
        self.raw_value = raw_value


class NotifyError(CalendarNotifierError):
    """Delivering one notification failed."""
