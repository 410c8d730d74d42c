"""Reconstructed timesheet entries and row classifications."""

from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class Entry(BaseModel):
    """One calendar day's task line, or a placeholder for a day without one."""

    date: dt.date
    name: str = ""
    start: str = ""  # Verbatim from the export, e.g. "13:37"
    end: str = ""

    model_config = {"frozen": True}

    @property
    def is_placeholder(self) -> bool:
        """True when the entry carries no start or end time."""
        return not self.start and not self.end

    @classmethod
    def placeholder(cls, day: dt.date) -> Entry:
        return cls(date=day)


class RowKind(StrEnum):
    DATE_HEADER = "DATE_HEADER"
    NO_ENTRIES = "NO_ENTRIES"
    TASK_LINE = "TASK_LINE"
    UNRECOGNIZED = "UNRECOGNIZED"


class ClassifiedRow(BaseModel):
    """Tagged outcome of classifying one parsed row."""

    kind: RowKind
    day: Optional[dt.date] = None  # DATE_HEADER only, resolved against the current year
    name: str = ""  # TASK_LINE only
    start: str = ""
    end: str = ""
