# Copyright (c) Syntropy Systems
"""Pytest fixtures for cmdbench tests."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Generator, Sequence
from pathlib import Path

import pytest

from cmdbench.models.outcome import OutcomeKind, RunOutcome

# Store original cwd at module load time
_original_cwd = Path.cwd()


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 100.0, step: float = 0.0) -> None:
        self.t = start
        self.step = step

    def now(self) -> float:
        current = self.t
        self.t += self.step
        return current

    def advance(self, seconds: float) -> None:
        self.t += seconds


class ScriptedRunner:
    """Stand-in for run_once that advances a fake clock.

    Each call consumes the next (kind, duration) pair; the last pair repeats
    once the script runs out.
    """

    def __init__(
        self,
        clock: FakeClock,
        script: Sequence[tuple[OutcomeKind, float]],
    ) -> None:
        self.clock = clock
        self.script = list(script)
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, command_argv: Sequence[str], clock: object) -> RunOutcome:
        assert clock is self.clock
        index = min(len(self.calls), len(self.script) - 1)
        kind, duration = self.script[index]
        self.calls.append(tuple(command_argv))
        self.clock.advance(duration)
        return RunOutcome(kind=kind, duration=duration)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_project(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run inside an empty directory with no config files or env overrides."""
    monkeypatch.setenv("HOME", str(temp_dir))
    for name in ("CMDBENCH_WARMUPS", "CMDBENCH_DURATION", "CMDBENCH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    os.chdir(temp_dir)

    yield temp_dir

    # Always return to original cwd
    os.chdir(_original_cwd)


@pytest.fixture
def fake_clock() -> FakeClock:
    """A manually advanced clock starting at t=100."""
    return FakeClock()


@pytest.fixture
def scripted_runner(
    fake_clock: FakeClock,
) -> Callable[..., ScriptedRunner]:
    """Factory for scripted runners bound to the fake clock."""

    def make(*script: tuple[OutcomeKind, float]) -> ScriptedRunner:
        return ScriptedRunner(fake_clock, script or [(OutcomeKind.SUCCESS, 0.25)])

    return make


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
