"""Timesheet emitter — writes one spreadsheet-ready CSV per four-week period.

Every file starts with a header row and a balance row, followed by one row
per entry. Totals are spreadsheet formulas that point at the row they are
written on, so the row counters below must match the physical lines of the
file exactly:

    A Date | B Task | C Start | D End | E Lunch | F Task Total | G Day Total |
    H Week Total | I Balance | J Comments | K Conditioned Hours
"""

from __future__ import annotations

import logging
from itertools import groupby
from typing import Optional, Sequence

from hoursheet.converter.dates import format_long_date, is_weekend, period_index
from hoursheet.converter.parser import row_writer
from hoursheet.core.exceptions import OutputWriteError
from hoursheet.core.protocols import IOutputStore
from hoursheet.core.types import Row, RowNumber, Rows
from hoursheet.models.entry import Entry
from hoursheet.models.timesheet import (
    BALANCE_ROW,
    FIRST_DATA_ROW,
    HEADER,
    PeriodFile,
    TimesheetLayout,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------

def task_total_formula(row: RowNumber) -> str:
    """End minus start minus lunch."""
    return f"=(D{row}-C{row})-E{row}"


def day_total_formula(first_row: RowNumber, row: RowNumber) -> str:
    return f"=SUM(F{first_row}:F{row})"


def week_total_formula(first_row: RowNumber, row: RowNumber) -> str:
    """Week's day totals in hours."""
    return f"=SUM(G{first_row}:G{row})*24"


def balance_formula(previous_balance_row: RowNumber, row: RowNumber, balance_row: RowNumber) -> str:
    """Previous balance plus this week's hours minus the conditioned hours."""
    return f"=I{previous_balance_row}+H{row}-K${balance_row}"


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def balance_row(entry: Entry, layout: TimesheetLayout) -> Row:
    return [
        format_long_date(entry.date),
        layout.balance_label,
        "", "", "", "", "", "",
        layout.opening_balance,
        "",
        layout.conditioned_hours,
    ]


def build_period_rows(entries: Sequence[Entry], layout: Optional[TimesheetLayout] = None) -> Rows:
    """All rows of one period file, header and balance row included.

    ``entries`` must all belong to the same period, in date order.
    """
    if layout is None:
        layout = TimesheetLayout()
    if not entries:
        return [list(HEADER)]

    rows: Rows = [list(HEADER), balance_row(entries[0], layout)]

    # Counters restart with every file
    row = FIRST_DATA_ROW
    balance_row_number = BALANCE_ROW
    day_start = row
    week_start = row
    previous_balance = balance_row_number

    for index, entry in enumerate(entries):
        following = entries[index + 1] if index + 1 < len(entries) else None
        closes_day = following is None or following.date != entry.date

        lunch = "" if is_weekend(entry.date) or entry.is_placeholder else layout.lunch
        task_total = "" if entry.is_placeholder else task_total_formula(row)
        day_total = week_total = balance = ""

        if closes_day and not entry.is_placeholder:
            day_total = day_total_formula(day_start, row)

        if closes_day and entry.date.weekday() == layout.week_end_weekday:
            week_total = week_total_formula(week_start, row)
            balance = balance_formula(previous_balance, row, balance_row_number)
            week_start = row + 1
            previous_balance = row

        if closes_day:
            day_start = row + 1

        rows.append([
            format_long_date(entry.date),
            entry.name,
            entry.start,
            entry.end,
            lunch,
            task_total,
            day_total,
            week_total,
            balance,
            "",
            "",
        ])
        row += 1

    return rows


def period_filename(entry: Entry) -> str:
    return f"{entry.date.isoformat()}.csv"


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

class TimesheetEmitter:
    """Writes entries to an output store, one file per four-week period."""

    def __init__(self, store: IOutputStore, layout: Optional[TimesheetLayout] = None) -> None:
        self._store = store
        self._layout = layout or TimesheetLayout()

    def write(self, entries: Sequence[Entry]) -> list[PeriodFile]:
        """Write every period and return the files, in order.

        Raises:
            OutputWriteError: If a period file cannot be created or written.
        """
        files: list[PeriodFile] = []
        for period, group in groupby(entries, key=lambda entry: period_index(entry.date)):
            files.append(self._write_period(period, list(group)))
        return files

    def _write_period(self, period: int, entries: list[Entry]) -> PeriodFile:
        filename = period_filename(entries[0])
        location = self._store.location(filename)
        logger.info("Creating file: %s", location)

        rows = build_period_rows(entries, self._layout)
        try:
            with self._store.open_text(filename) as stream:
                row_writer(stream).writerows(rows)
        except OSError as exc:
            raise OutputWriteError(location, str(exc)) from exc

        return PeriodFile(
            filename=filename,
            location=location,
            period=period,
            first_date=entries[0].date,
            row_count=len(entries),
        )


def write_timesheets(
    entries: Sequence[Entry],
    store: IOutputStore,
    layout: Optional[TimesheetLayout] = None,
) -> list[PeriodFile]:
    """Write ``entries`` to ``store``; ``len(result)`` is the number of files."""
    return TimesheetEmitter(store, layout).write(entries)
