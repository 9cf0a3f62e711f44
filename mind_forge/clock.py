from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock used to pace rounds and measure answer time.

    Round logic asks this interface for the time instead of reading it directly.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Wall clock for the pygame shell, backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()
