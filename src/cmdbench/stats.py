# Copyright (c) Syntropy Systems
"""Streaming statistics over measured runs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdbench.models.outcome import RunOutcome


@dataclass
class Statistics:
    """Running min/max/sum/count/failure tally.

    Keeps no per-run history, so memory stays constant however many runs
    fit in the measurement window.
    """

    count: int = 0
    failure_count: int = 0
    min_seconds: float = 0.0
    max_seconds: float = 0.0
    sum_seconds: float = 0.0

    def record(self, outcome: RunOutcome) -> None:
        """Fold one measured run into the totals."""
        duration = outcome.duration
        if self.count == 0:
            self.min_seconds = self.max_seconds = duration
        else:
            self.min_seconds = min(self.min_seconds, duration)
            self.max_seconds = max(self.max_seconds, duration)
        self.sum_seconds += duration
        self.count += 1

        if outcome.is_failure:
            self.failure_count += 1

    @property
    def avg_seconds(self) -> float:
        """Mean duration, 0.0 when nothing was recorded."""
        if self.count == 0:
            return 0.0
        avg = self.sum_seconds / self.count
        # float rounding in the sum must not push avg outside [min, max]
        return min(max(avg, self.min_seconds), self.max_seconds)
