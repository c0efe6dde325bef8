from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterator, List, Optional

from calendar_notifier.errors import EventParseError
from calendar_notifier.models.calendar_models import Event, FieldLookup, FieldStatus
from calendar_notifier.utils.dates import parse_compact_date
from calendar_notifier.utils.formatting import for_log


logger = logging.getLogger(__name__)

EVENT_BOUNDARY = "BEGIN:VEVENT"
FIELD_DELIMITERS = (":", ";")
LINE_TERMINATOR = "\n"

SkipCallback = Callable[[str, str], None]


def lookup_field(block: str, property_name: str) -> FieldLookup:
    """
    Best-effort scan for a property written at the start of a line.

    The value starts after the single delimiter that follows the name (`:`
    or `;`), so `DTSTART;TZID=Europe/Oslo:20240115T090000` yields
    `TZID=Europe/Oslo:20240115T090000`. Folded continuation lines are not
    joined.
    """
    pos = 0
    while True:
        idx = block.find(property_name, pos)
        if idx == -1:
            return FieldLookup(name=property_name, status=FieldStatus.ABSENT)
        delimiter_at = idx + len(property_name)
        at_line_start = idx == 0 or block[idx - 1] == LINE_TERMINATOR
        if at_line_start and block[delimiter_at:delimiter_at + 1] in FIELD_DELIMITERS:
            break
        pos = idx + 1

    start = delimiter_at + 1
    end = block.find(LINE_TERMINATOR, start)
    if end == -1:
        return FieldLookup(name=property_name, status=FieldStatus.TRUNCATED, raw=block[start:])
    value = block[start:end]
    if value.endswith("\r"):
        value = value[:-1]
    return FieldLookup(name=property_name, status=FieldStatus.FOUND, value=value)


def extract_field(block: str, property_name: str) -> str:
    """Value of `property_name` in `block`, or "" when absent or truncated."""
    lookup = lookup_field(block, property_name)
    return lookup.value if lookup.found else ""


def split_event_blocks(response: str) -> List[str]:
    # Everything before the first boundary is calendar preamble
    return response.split(EVENT_BOUNDARY)[1:]


def parse_start_date(raw_start: str) -> date:
    segments = raw_start.split(":")
    if len(segments) < 2:
        raise EventParseError("DTSTART has no date segment", raw_value=raw_start)
    try:
        return parse_compact_date(segments[1][:8])
    except ValueError as exc:
        raise EventParseError(f"DTSTART date is invalid: {exc}", raw_value=raw_start) from exc


def parse_event_block(block: str) -> Event:
    start = lookup_field(block, "DTSTART")
    if start.status is FieldStatus.ABSENT:
        raise EventParseError("DTSTART is missing")
    if start.status is FieldStatus.TRUNCATED:
        raise EventParseError("DTSTART is not terminated", raw_value=start.raw)
    start_date = parse_start_date(start.value)

    summary = lookup_field(block, "SUMMARY")
    if not summary.found:
        logger.warning("Event has no usable SUMMARY (%s), using empty title", summary.status.value)
    uid = lookup_field(block, "UID")

    return Event(
        summary=summary.value,
        start_date=start_date,
        raw_start=start.value,
        uid=uid.value if uid.found else None,
    )


def parse_events(response: str, on_skip: Optional[SkipCallback] = None) -> Iterator[Event]:
    """
    Lazily yield the well-formed events of a raw calendar response, in order.

    Blocks that cannot be parsed are logged and skipped; `on_skip` is called
    with the block and the reason for each of them.
    """
    for block in split_event_blocks(response):
        if not block.strip():
            continue
        try:
            event = parse_event_block(block)
        except EventParseError as exc:
            logger.warning("Skipping event: %s (raw value: %s)", exc, for_log(exc.raw_value))
            if on_skip is not None:
                on_skip(block, str(exc))
            continue
        logger.info("Parsed event: %s: %s", event.summary, event.raw_start)
        yield event
