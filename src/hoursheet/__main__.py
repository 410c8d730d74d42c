"""Allow ``python -m hoursheet``."""

from __future__ import annotations

import sys

from hoursheet.cli import main

sys.exit(main())
