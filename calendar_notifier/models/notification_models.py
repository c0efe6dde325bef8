from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from calendar_notifier.models.calendar_models import Event


class NotificationDecision(BaseModel):
    should_notify: bool
    message: str = ""
    matched: Optional[str] = None  # "today" or "one_week"


class OutcomeStatus(str, Enum):
    NOT_DUE = "not_due"
    NOTIFIED = "notified"
    NOTIFY_FAILED = "notify_failed"


class EventOutcome(BaseModel):
    event: Event
    decision: NotificationDecision
    status: OutcomeStatus
    error: Optional[str] = None


class RunSummary(BaseModel):
    reference_date: date
    outcomes: List[EventOutcome] = Field(default_factory=list)
    skipped_blocks: int = 0

    @property
    def evaluated(self) -> int:
        return len(self.outcomes)

    @property
    def notified(self) -> int:
        return sum(1 for o in self.outcomes if o.status is OutcomeStatus.NOTIFIED)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status is OutcomeStatus.NOTIFY_FAILED)
