# Copyright (c) Syntropy Systems
"""Pydantic models for cmdbench runs, configuration and summaries."""

from .bench import BenchConfig, BenchSummary
from .outcome import OutcomeKind, RunOutcome

__all__ = ["BenchConfig", "BenchSummary", "OutcomeKind", "RunOutcome"]
