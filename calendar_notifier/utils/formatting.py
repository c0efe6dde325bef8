from __future__ import annotations

from datetime import date

from calendar_notifier.utils.dates import pretty_date


def truncate(text: str, max_len: int = 120) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 1].rstrip() + "…"


def for_log(text: str, max_len: int = 120) -> str:
    """Single-line, bounded rendering of raw calendar text for log records."""
    return truncate(text.replace("\r", "\\r").replace("\n", "\\n"), max_len)


def notification_message(summary: str, start: date) -> str:
    return f"{summary}: {pretty_date(start)}"
