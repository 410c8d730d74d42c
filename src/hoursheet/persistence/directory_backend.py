"""Filesystem output store implementing IOutputStore."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO


class DirectoryOutputStore:
    """Production IOutputStore writing files into one directory.

    The directory is not created or validated; a missing directory surfaces
    as an ``OSError`` when the first file is opened.
    """

    def __init__(self, output_dir: str = ".", encoding: str = "utf-8") -> None:
        self._output_dir = Path(output_dir)
        self._encoding = encoding

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def location(self, name: str) -> str:
        return str(self._output_dir / name)

    def open_text(self, name: str) -> TextIO:
        # newline="" so the csv writer's "\n" terminator reaches the file as is
        return open(self._output_dir / name, "w", encoding=self._encoding, newline="")
