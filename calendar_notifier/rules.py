from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Union

from calendar_notifier.models.calendar_models import Event
from calendar_notifier.models.notification_models import NotificationDecision
from calendar_notifier.utils.dates import as_date, days_from
from calendar_notifier.utils.formatting import notification_message


logger = logging.getLogger(__name__)

REMINDER_LEAD_DAYS = 7


def evaluate(event: Event, reference_now: Union[date, datetime]) -> NotificationDecision:
    """
    Decide whether `event` is due for a notification relative to `reference_now`.

    An event is due when its start day-of-month equals today's or the one a
    week from today. Month and year are not compared, so an event a whole
    number of months away on the same day also matches.
    """
    today = as_date(reference_now)
    one_week_from_now = days_from(today, REMINDER_LEAD_DAYS)
    start_day = event.start_date.day

    if start_day == today.day:
        matched = "today"
    elif start_day == one_week_from_now.day:
        matched = "one_week"
    else:
        return NotificationDecision(should_notify=False)

    logger.debug("Event %r matches %s window", event.summary, matched)
    return NotificationDecision(
        should_notify=True,
        message=notification_message(event.summary, event.start_date),
        matched=matched,
    )
