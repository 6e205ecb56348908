# Copyright (c) Syntropy Systems
"""Monotonic clock used for all duration measurements."""
from __future__ import annotations

import time
from typing import Protocol

from cmdbench.errors import ClockError


class Clock(Protocol):
    """Anything that can hand out monotonic timestamps in seconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Clock backed by ``time.monotonic``.

    Unaffected by wall-clock adjustments (NTP, DST).
    """

    def now(self) -> float:
        """Return the current monotonic timestamp in fractional seconds."""
        try:
            return time.monotonic()
        except OSError as e:
            msg = f"Monotonic clock unavailable: {e}"
            raise ClockError(msg) from e

    def elapsed(self, since: float) -> float:
        """Return seconds elapsed since a timestamp from ``now()``."""
        return elapsed(self, since)


def elapsed(clock: Clock, since: float) -> float:
    """Seconds elapsed on ``clock`` since ``since``."""
    return clock.now() - since
