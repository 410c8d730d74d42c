"""hoursheet exception hierarchy."""

from __future__ import annotations


class HoursheetError(Exception):
    """Base exception for all hoursheet errors."""


class ConversionError(HoursheetError):
    """Error that aborts the conversion of a single input file."""


class MalformedInputError(ConversionError):
    """Input text could not be tokenized into rows."""

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        super().__init__(f"Malformed input at line {line}: {message}")


class MissingStartDateError(ConversionError):
    """Row 1 is absent or does not start with a parsable date range."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value
        if value is None:
            super().__init__("Missing date range row")
        else:
            super().__init__(f"Unparsable start date in date range {value!r}")


class OutputWriteError(ConversionError):
    """A timesheet output file could not be created or written."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path!r}: {message}")
