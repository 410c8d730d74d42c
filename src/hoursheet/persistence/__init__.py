"""Pluggable output stores behind the IOutputStore protocol."""

from __future__ import annotations

from hoursheet.core.config import AppSettings
from hoursheet.persistence.directory_backend import DirectoryOutputStore


def create_output_store(
    settings: AppSettings | None = None,
    output_dir: str | None = None,
) -> DirectoryOutputStore:
    """Create the directory store from settings, ``output_dir`` taking precedence."""
    if settings is None:
        settings = AppSettings()

    return DirectoryOutputStore(
        output_dir=output_dir if output_dir is not None else settings.output_dir,
        encoding=settings.encoding,
    )
