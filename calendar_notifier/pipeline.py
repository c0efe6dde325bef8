from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Union

from calendar_notifier.errors import FetchError, NotifyError
from calendar_notifier.event_parser import parse_events
from calendar_notifier.models.calendar_models import Event
from calendar_notifier.models.notification_models import (
    EventOutcome,
    NotificationDecision,
    OutcomeStatus,
    RunSummary,
)
from calendar_notifier.rules import evaluate
from calendar_notifier.utils.dates import as_date


logger = logging.getLogger(__name__)

FetchFn = Callable[[], str]
NotifyFn = Callable[[str], Optional[bool]]


def _fetch(fetch: FetchFn) -> str:
    try:
        return fetch()
    except FetchError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise FetchError(f"Calendar fetch failed: {exc}") from exc


def _deliver(event: Event, decision: NotificationDecision, notify: NotifyFn) -> EventOutcome:
    try:
        if notify(decision.message) is False:
            raise NotifyError("notifier reported failure")
    except Exception as exc:  # noqa: BLE001
        logger.error("Failed to send notification for %r (uid=%s): %s", event.summary, event.uid, exc)
        return EventOutcome(
            event=event,
            decision=decision,
            status=OutcomeStatus.NOTIFY_FAILED,
            error=str(exc),
        )
    logger.info("Sent notification: %s", decision.message)
    return EventOutcome(event=event, decision=decision, status=OutcomeStatus.NOTIFIED)


def run(fetch: FetchFn, notify: NotifyFn, reference_now: Union[date, datetime]) -> RunSummary:
    """
    One pass: fetch the calendar, parse it, and notify every due event.

    A fetch failure raises FetchError. Notification failures are recorded in
    the returned summary and never stop the remaining events.
    """
    summary = RunSummary(reference_date=as_date(reference_now))

    logger.info("Getting events")
    response = _fetch(fetch)

    def _count_skip(_block: str, _reason: str) -> None:
        summary.skipped_blocks += 1

    for event in parse_events(response, on_skip=_count_skip):
        decision = evaluate(event, summary.reference_date)
        if not decision.should_notify:
            summary.outcomes.append(
                EventOutcome(event=event, decision=decision, status=OutcomeStatus.NOT_DUE)
            )
            continue
        logger.info("Event %r matches the %s window, sending notification", event.summary, decision.matched)
        summary.outcomes.append(_deliver(event, decision, notify))

    logger.info(
        "Run finished: %d events evaluated, %d notified, %d failed, %d skipped",
        summary.evaluated,
        summary.notified,
        summary.failed,
        summary.skipped_blocks,
    )
    return summary
