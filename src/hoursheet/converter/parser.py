"""CSV tokenizer for hours exports and timesheet rows.

Fields are separated by commas and rows by ``\\n``, ``\\r\\n`` or ``\\r``.
Quoted fields may contain commas and line breaks, with ``""`` standing for a
literal quote. A quote may only open a field; one inside an unquoted value
is an error. Rows without any field are dropped.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, TextIO

from hoursheet.core.exceptions import MalformedInputError
from hoursheet.core.types import Row, Rows


class HoursDialect(csv.Dialect):
    """Dialect shared by the export reader and the timesheet writer."""

    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = False
    lineterminator = "\n"
    quoting = csv.QUOTE_MINIMAL
    strict = True


def parse_rows(text: str) -> Rows:
    """Tokenize ``text`` into rows of field strings.

    Raises:
        MalformedInputError: On an unterminated quoted field, a quote inside an
            unquoted value or text after a closing quote.
    """
    _check_unquoted_quotes(text)
    reader = csv.reader(io.StringIO(text, newline=""), dialect=HoursDialect)
    rows: Rows = []
    try:
        for row in reader:
            if row:
                rows.append(row)
    except csv.Error as exc:
        raise MalformedInputError(reader.line_num, str(exc)) from exc
    return rows


def _check_unquoted_quotes(text: str) -> None:
    # csv accepts a stray quote mid-value, so catch it before the reader runs
    line = 1
    in_quotes = False
    at_field_start = True
    index = 0
    while index < len(text):
        char = text[index]
        if in_quotes:
            if char == '"':
                if text[index + 1:index + 2] == '"':
                    index += 1
                else:
                    in_quotes = False
        elif char == '"':
            if not at_field_start:
                raise MalformedInputError(line, "quote inside unquoted field")
            in_quotes = True
        at_field_start = not in_quotes and char in ",\r\n"
        if char == "\n" or (char == "\r" and text[index + 1:index + 2] != "\n"):
            line += 1
        index += 1


def format_row(fields: Iterable[str]) -> str:
    """Serialize one row with the same quoting rules, ``\\n`` terminated."""
    buffer = io.StringIO()
    csv.writer(buffer, dialect=HoursDialect).writerow(list(fields))
    return buffer.getvalue()


def row_writer(stream: TextIO):
    """Return a ``csv.writer`` emitting rows in the hours dialect."""
    return csv.writer(stream, dialect=HoursDialect)


def first_field(row: Row) -> str:
    return row[0] if row else ""
