"""Frame time delta."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeStep:
    """Elapsed time between frames, in seconds."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    def seconds(self) -> float:
        """Return the step in seconds."""
        return self.time

    def milliseconds(self) -> float:
        """Return the step in milliseconds."""
        return self.time * 1000.0