"""Type aliases used across hoursheet."""

from __future__ import annotations

Row = list[str]
Rows = list[Row]
RowNumber = int
