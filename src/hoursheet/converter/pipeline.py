"""Conversion pipeline — parser → reconstructor → emitter, one file at a time."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from hoursheet.converter.emitter import write_timesheets
from hoursheet.converter.parser import parse_rows
from hoursheet.converter.reconstructor import reconstruct_entries
from hoursheet.core.exceptions import ConversionError
from hoursheet.core.protocols import IOutputStore
from hoursheet.models.batch import BatchResult, FileResult, FileStatus
from hoursheet.models.timesheet import PeriodFile, TimesheetLayout

logger = logging.getLogger(__name__)


def convert_text(
    text: str,
    store: IOutputStore,
    layout: Optional[TimesheetLayout] = None,
) -> tuple[int, list[PeriodFile]]:
    """Convert one export's text. Returns the entry count and written files."""
    rows = parse_rows(text)
    entries = reconstruct_entries(rows)
    logger.debug("Reconstructed %d entries from %d rows", len(entries), len(rows))
    return len(entries), write_timesheets(entries, store, layout)


def convert_file(
    path: str,
    store: IOutputStore,
    layout: Optional[TimesheetLayout] = None,
    encoding: str = "utf-8",
) -> FileResult:
    """Convert one export file.

    Raises:
        ConversionError: If the file cannot be read, parsed or written.
    """
    logger.info("Processing file: %s", path)
    try:
        text = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(f"Could not read {path!r}: {exc}") from exc

    entry_count, files = convert_text(text, store, layout)
    return FileResult(path=path, entry_count=entry_count, files=files)


def convert_files(
    paths: Iterable[str],
    store: IOutputStore,
    layout: Optional[TimesheetLayout] = None,
    encoding: str = "utf-8",
) -> BatchResult:
    """Convert every file in order; a failing file does not stop the batch."""
    batch = BatchResult()
    for path in paths:
        try:
            result = convert_file(path, store, layout, encoding)
        except ConversionError as exc:
            logger.error("Failed to convert %s: %s", path, exc)
            result = FileResult(path=path, status=FileStatus.FAILED, error=str(exc))
        batch.results.append(result)

    logger.info(
        "Converted %d of %d files, %d timesheets written",
        len(batch.results) - len(batch.failed),
        len(batch.results),
        batch.files_written,
    )
    return batch
