"""Timesheet layout and output file models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

HEADER: tuple[str, ...] = (
    "Date",
    "Task",
    "Start",
    "End",
    "Lunch",
    "Task Total",
    "Day Total",
    "Week Total",
    "Balance",
    "Comments",
    "Conditioned Hours",
)

# Header on row 1, balance row on row 2
BALANCE_ROW = 2
FIRST_DATA_ROW = 3


class TimesheetLayout(BaseModel):
    """Fixed values written into every timesheet file."""

    lunch: str = "0:30"
    conditioned_hours: str = "37"
    opening_balance: str = "0"
    balance_label: str = "Balance brought forward"
    week_end_weekday: int = Field(default=6, ge=0, le=6)  # date.weekday(), 6 = Sunday


class PeriodFile(BaseModel):
    """Metadata for one written four-week timesheet file."""

    filename: str
    location: str = ""
    period: int
    first_date: date
    row_count: int = 0  # Entry rows, excluding header and balance rows
