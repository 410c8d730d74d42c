"""In-memory output store for unit tests."""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import Iterator, TextIO


class MemoryOutputStore:
    """Dict-backed IOutputStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, str] = {}

    def location(self, name: str) -> str:
        return f"memory://{name}"

    @contextmanager
    def open_text(self, name: str) -> Iterator[TextIO]:
        buffer = io.StringIO(newline="")
        try:
            yield buffer
        finally:
            self._files[name] = buffer.getvalue()

    def read(self, name: str) -> str:
        return self._files[name]

    def list_files(self) -> list[str]:
        return sorted(self._files)
