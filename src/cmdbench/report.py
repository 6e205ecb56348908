# Copyright (c) Syntropy Systems
"""Formatting of benchmark results."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdbench.models.bench import BenchSummary

EXIT_OK = 0
EXIT_FAILURES = 1


def format_report(summary: BenchSummary) -> str:
    """Render the four-line plain text report."""
    lines = [
        f"Min: {summary.min_seconds:.6f} seconds  Warmups: {summary.warmups}",
        f"Avg: {summary.avg_seconds:.6f} seconds  Runs: {summary.runs}",
        f"Max: {summary.max_seconds:.6f} seconds  Fails: {summary.failures}",
        f"Total: {summary.total_seconds:.6f} seconds",
    ]
    return "\n".join(lines)


def format_json(summary: BenchSummary) -> str:
    """Render the summary as a JSON object."""
    return summary.model_dump_json(indent=2)


def exit_code(summary: BenchSummary) -> int:
    """Nonzero if any measured run failed.

    A benchmark that completed no runs at all is not an error.
    """
    return EXIT_FAILURES if summary.failures > 0 else EXIT_OK
