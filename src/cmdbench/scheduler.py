# Copyright (c) Syntropy Systems
"""Warmup and deadline-bounded measurement loop."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from cmdbench.clock import Clock, MonotonicClock, elapsed
from cmdbench.errors import ConfigError
from cmdbench.models.bench import BenchConfig, BenchSummary
from cmdbench.runner import run_once
from cmdbench.stats import Statistics

if TYPE_CHECKING:
    from cmdbench.models.base import CommandArgv
    from cmdbench.models.outcome import RunOutcome

logger = logging.getLogger(__name__)

RunFn = Callable[["CommandArgv", Clock], "RunOutcome"]


class Phase(str, Enum):
    """Benchmark lifecycle. Only ever moves forward."""

    WARMUP = "warmup"
    MEASURE = "measure"
    FINISHED = "finished"


class Benchmark:
    """Runs one command through a warmup phase and a timed measurement phase.

    Warmup runs execute exactly ``config.warmups`` times with no deadline and
    are never recorded. Measured runs repeat until ``config.duration``
    seconds have elapsed, checked only before each new run, so a run that
    starts before the deadline always completes and is counted.
    """

    command_argv: tuple[str, ...]
    config: BenchConfig
    clock: Clock
    stats: Statistics
    phase: Phase

    def __init__(
        self,
        command_argv: CommandArgv,
        config: BenchConfig | None = None,
        clock: Clock | None = None,
        run: RunFn = run_once,
    ) -> None:
        """Initialize a benchmark.

        Args:
            command_argv: Program followed by its arguments (no shell)
            config: Warmup count and measurement duration
            clock: Monotonic time source, mainly replaced in tests
            run: Function that runs the command once

        """
        if not command_argv:
            msg = "No command provided"
            raise ConfigError(msg)

        self.command_argv = tuple(command_argv)
        self.config = config or BenchConfig()
        self.clock = clock or MonotonicClock()
        self._run = run
        self.stats = Statistics()
        self.phase = Phase.WARMUP
        self._total_seconds: Optional[float] = None

    def warmup(self) -> None:
        """Run the warmup iterations, discarding their results."""
        if self.phase is not Phase.WARMUP:
            msg = f"Cannot warm up in phase {self.phase.value}"
            raise RuntimeError(msg)

        for i in range(self.config.warmups):
            outcome = self._run(self.command_argv, self.clock)
            logger.debug(
                "warmup %d/%d: %s in %.6fs",
                i + 1, self.config.warmups, outcome.kind.value, outcome.duration,
            )
        self.phase = Phase.MEASURE

    def measure(self) -> Statistics:
        """Run measured iterations until the duration budget is spent."""
        if self.phase is Phase.WARMUP:
            self.warmup()
        if self.phase is not Phase.MEASURE:
            msg = "Benchmark already finished"
            raise RuntimeError(msg)

        started = self.clock.now()
        while elapsed(self.clock, started) < self.config.duration:
            outcome = self._run(self.command_argv, self.clock)
            self.stats.record(outcome)
            logger.debug(
                "run %d: %s in %.6fs%s",
                self.stats.count,
                outcome.kind.value,
                outcome.duration,
                f" ({outcome.reason})" if outcome.reason else "",
            )

        self._total_seconds = elapsed(self.clock, started)
        self.phase = Phase.FINISHED
        return self.stats

    def run(self) -> BenchSummary:
        """Warm up, measure and summarize."""
        self.warmup()
        self.measure()
        return self.summary()

    def summary(self) -> BenchSummary:
        """Summary of a finished benchmark."""
        if self._total_seconds is None:
            msg = "Benchmark has not been measured yet"
            raise RuntimeError(msg)

        stats = self.stats
        return BenchSummary(
            command=list(self.command_argv),
            warmups=self.config.warmups,
            runs=stats.count,
            failures=stats.failure_count,
            min_seconds=stats.min_seconds,
            avg_seconds=stats.avg_seconds,
            max_seconds=stats.max_seconds,
            total_seconds=self._total_seconds,
        )


def run_benchmark(
    command_argv: CommandArgv,
    config: BenchConfig | None = None,
    clock: Clock | None = None,
    run: RunFn = run_once,
) -> BenchSummary:
    """Benchmark ``command_argv`` and return its summary."""
    return Benchmark(command_argv, config, clock=clock, run=run).run()
