"""Task reconstruction — turns parsed export rows into a dense list of entries.

Row 0 of an export is a title, row 1 holds the ``"<start> to <end>"`` date
range. Every later row is either a day header (``"Tuesday 3 January"``, no
year), the ``[No entries]`` marker, a five-field task line, or noise. Days
missing between two headers are filled with placeholder entries, and a
header that goes backwards in time is read as a year rollover.
"""

from __future__ import annotations

import logging
from datetime import date

from hoursheet.converter.dates import (
    days_between,
    days_strictly_between,
    is_time_of_day,
    parse_day_header,
    parse_range_start,
    with_year,
)
from hoursheet.converter.parser import first_field
from hoursheet.core.exceptions import MissingStartDateError
from hoursheet.core.types import Row, Rows
from hoursheet.models.entry import ClassifiedRow, Entry, RowKind

logger = logging.getLogger(__name__)

NO_ENTRIES_SENTINEL = "[No entries]"
TASK_FIELD_COUNT = 5
FIRST_BODY_ROW = 2


def classify_row(row: Row, current_year: int) -> ClassifiedRow:
    """Classify one export row without changing any state."""
    if len(row) == 1:
        value = row[0]
        if value == NO_ENTRIES_SENTINEL:
            return ClassifiedRow(kind=RowKind.NO_ENTRIES)
        day = parse_day_header(value, current_year)
        if day is not None:
            return ClassifiedRow(kind=RowKind.DATE_HEADER, day=day)
        return ClassifiedRow(kind=RowKind.UNRECOGNIZED)

    if len(row) == TASK_FIELD_COUNT:
        # Fields 4 and 5 must be present but carry nothing we use
        name, start, end = row[0], row[1], row[2]
        if is_time_of_day(start) and is_time_of_day(end):
            return ClassifiedRow(kind=RowKind.TASK_LINE, name=name, start=start, end=end)

    return ClassifiedRow(kind=RowKind.UNRECOGNIZED)


def read_start_date(rows: Rows) -> date:
    """Start of the date range held in the first field of row 1."""
    if len(rows) < 2:
        raise MissingStartDateError()
    value = first_field(rows[1])
    start = parse_range_start(value)
    if start is None:
        raise MissingStartDateError(value)
    return start


class TaskReconstructor:
    """Walks export rows in order, tracking the current date and year."""

    def __init__(self, start: date) -> None:
        self.current_date = start
        self.current_year = start.year
        self.entries: list[Entry] = []

    def feed(self, rows: Rows, first_row_number: int = FIRST_BODY_ROW) -> list[Entry]:
        for number, row in enumerate(rows, start=first_row_number):
            self.apply(row, number)
        return self.entries

    def apply(self, row: Row, row_number: int | None = None) -> None:
        classified = classify_row(row, self.current_year)

        if classified.kind == RowKind.DATE_HEADER:
            self._advance_to(classified.day)
        elif classified.kind == RowKind.NO_ENTRIES:
            self.entries.append(Entry.placeholder(self.current_date))
        elif classified.kind == RowKind.TASK_LINE:
            self.entries.append(Entry(
                date=self.current_date,
                name=classified.name,
                start=classified.start,
                end=classified.end,
            ))
        else:
            logger.debug("Skipping row %s: %r", row_number, row)

    def _advance_to(self, day: date) -> None:
        previous = self.current_date
        delta = days_between(previous, day)

        if delta < 0:
            # Headers only run forward, so going back means a new year started.
            # Any backward jump is taken as a rollover, even a logging mistake.
            rolled = with_year(day, self.current_year + 1)
            if rolled is None:
                logger.warning("Date %s does not exist in %d, header ignored", day, self.current_year + 1)
                return
            self.current_year = rolled.year
            logger.debug("Year rollover at %s, now %s", previous, rolled)
            self.current_date = rolled
            return

        for missing in days_strictly_between(previous, day):
            logger.debug("Filling skipped day %s", missing)
            self.entries.append(Entry.placeholder(missing))
        self.current_date = day


def reconstruct_entries(rows: Rows) -> list[Entry]:
    """Build the ordered entry list for a whole export.

    Raises:
        MissingStartDateError: If row 1 does not hold a parsable date range.
    """
    start = read_start_date(rows)
    reconstructor = TaskReconstructor(start)
    return reconstructor.feed(rows[FIRST_BODY_ROW:])
