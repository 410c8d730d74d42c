"""Integration test fixtures — sample hours export and an output directory."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def hours_export() -> Path:
    """Export covering two periods, with gaps, a sentinel and noise rows."""
    return FIXTURES / "hours_export.csv"


@pytest.fixture
def output_dir(tmp_path) -> Path:
    out = tmp_path / "timesheets"
    out.mkdir()
    return out
