"""Shared test doubles — memory output store and a store that cannot write."""

from __future__ import annotations

from typing import TextIO

from hoursheet.persistence.memory_backend import MemoryOutputStore


class FailingOutputStore(MemoryOutputStore):
    """MemoryOutputStore whose files cannot be opened."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__()
        self._message = message

    def open_text(self, name: str) -> TextIO:
        raise PermissionError(13, self._message, name)


__all__ = ["FailingOutputStore", "MemoryOutputStore"]
