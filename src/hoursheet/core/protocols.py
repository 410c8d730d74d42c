"""Protocol interfaces for hoursheet abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import ContextManager, Protocol, TextIO, runtime_checkable


# ---------------------------------------------------------------------------
# Output Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IOutputStore(Protocol):
    """Destination for timesheet files, one text file per period."""

    def open_text(self, name: str) -> ContextManager[TextIO]: ...

    def location(self, name: str) -> str: ...
