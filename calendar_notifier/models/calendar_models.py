from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FieldStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    TRUNCATED = "truncated"


class FieldLookup(BaseModel):
    """Outcome of looking up one property in a raw event block.

    `value` is only meaningful when `status` is FOUND; an empty value on a
    FOUND lookup is a real empty field, not a missing one. `raw` keeps the
    unterminated tail for TRUNCATED lookups so it can be logged.
    """

    name: str
    status: FieldStatus
    value: str = ""
    raw: str = ""

    @property
    def found(self) -> bool:
        return self.status is FieldStatus.FOUND


class Event(BaseModel):
    summary: str
    start_date: date
    raw_start: str
    uid: Optional[str] = Field(default=None)
