# Copyright (c) Syntropy Systems
"""Pydantic models for benchmark configuration and results."""

from __future__ import annotations

from pydantic import Field

from .base import FrozenModel

DEFAULT_WARMUPS = 0
DEFAULT_DURATION = 5.0


class BenchConfig(FrozenModel):
    """Validated benchmark parameters."""

    warmups: int = Field(default=DEFAULT_WARMUPS, ge=0)
    duration: float = Field(default=DEFAULT_DURATION, gt=0)


class BenchSummary(FrozenModel):
    """Final statistics of a benchmark, built once the loop exits."""

    command: list[str]
    warmups: int = Field(ge=0)
    runs: int = Field(ge=0)
    failures: int = Field(ge=0)
    min_seconds: float
    avg_seconds: float
    max_seconds: float
    total_seconds: float
