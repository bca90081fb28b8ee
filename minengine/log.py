"""Plain formatted logging to standard output."""

from __future__ import annotations

import sys
from typing import Any


def log(fmt: str, *args: Any) -> None:
    """Print ``fmt`` formatted with ``args`` (``{}`` / ``{0}`` placeholders), then a newline."""
    sys.stdout.write(fmt.format(*args))
    sys.stdout.write("\n")
    sys.stdout.flush()