"""Tests for the notification rule."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from calendar_notifier.models.calendar_models import Event
from calendar_notifier.rules import evaluate


REFERENCE = date(2024, 1, 15)


def _event(start: date, summary: str = "Dentist") -> Event:
    return Event(summary=summary, start_date=start, raw_start=f"X:{start:%Y%m%d}")


class TestEvaluate:
    def test_same_day_notifies(self) -> None:
        decision = evaluate(_event(date(2024, 1, 15)), REFERENCE)
        assert decision.should_notify
        assert decision.matched == "today"
        assert decision.message == "Dentist: 15/01/2024"

    def test_one_week_out_notifies(self) -> None:
        decision = evaluate(_event(date(2024, 1, 22)), REFERENCE)
        assert decision.should_notify
        assert decision.matched == "one_week"
        assert decision.message == "Dentist: 22/01/2024"

    def test_same_day_of_month_in_other_month_notifies(self) -> None:
        # Only the day of month is compared
        decision = evaluate(_event(date(2024, 2, 15)), REFERENCE)
        assert decision.should_notify

    def test_next_day_does_not_notify(self) -> None:
        decision = evaluate(_event(date(2024, 1, 16)), REFERENCE)
        assert not decision.should_notify
        assert decision.message == ""
        assert decision.matched is None

    def test_one_week_across_month_end(self) -> None:
        decision = evaluate(_event(date(2024, 2, 4)), date(2024, 1, 28))
        assert decision.should_notify
        assert decision.matched == "one_week"

    def test_accepts_datetime_reference(self) -> None:
        decision = evaluate(_event(date(2024, 1, 15)), datetime(2024, 1, 15, 23, 59))
        assert decision.should_notify

    @pytest.mark.parametrize("summary", ["Tom & Jerry?", "a/b #1", ""])
    def test_message_is_not_escaped(self, summary: str) -> None:
        decision = evaluate(_event(date(2024, 1, 15), summary=summary), REFERENCE)
        assert decision.message == f"{summary}: 15/01/2024"
