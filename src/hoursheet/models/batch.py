"""Batch and per-file conversion results."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from hoursheet.models.timesheet import PeriodFile


class FileStatus(StrEnum):
    CONVERTED = "CONVERTED"
    FAILED = "FAILED"


class FileResult(BaseModel):
    """Outcome of converting one input file."""

    path: str
    status: FileStatus = FileStatus.CONVERTED
    entry_count: int = 0
    files: list[PeriodFile] = Field(default_factory=list)
    error: str = ""


class BatchResult(BaseModel):
    """Outcome of converting every input file of a run."""

    results: list[FileResult] = Field(default_factory=list)

    @property
    def failed(self) -> list[FileResult]:
        return [r for r in self.results if r.status == FileStatus.FAILED]

    @property
    def files_written(self) -> int:
        """Total number of timesheet files written across the batch."""
        return sum(len(r.files) for r in self.results)

    @property
    def ok(self) -> bool:
        return not self.failed
