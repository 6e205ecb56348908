# Copyright (c) Syntropy Systems
"""Tests for report formatting and exit codes."""

import json

from cmdbench.models.bench import BenchSummary
from cmdbench.report import exit_code, format_json, format_report


def _summary(**overrides: object) -> BenchSummary:
    values: dict[str, object] = {
        "command": ["sleep", "1"],
        "warmups": 2,
        "runs": 4,
        "failures": 0,
        "min_seconds": 1.0018321,
        "avg_seconds": 1.002114,
        "max_seconds": 1.0025,
        "total_seconds": 4.0084671,
    }
    values.update(overrides)
    return BenchSummary.model_validate(values)


class TestFormatReport:
    """Tests for the four-line text report."""

    def test_layout(self) -> None:
        """Test exact line layout and six-decimal durations."""
        text = format_report(_summary())

        assert text.splitlines() == [
            "Min: 1.001832 seconds  Warmups: 2",
            "Avg: 1.002114 seconds  Runs: 4",
            "Max: 1.002500 seconds  Fails: 0",
            "Total: 4.008467 seconds",
        ]

    def test_zero_runs(self) -> None:
        """Test the report when no run completed."""
        summary = _summary(
            warmups=0, runs=0, min_seconds=0.0, avg_seconds=0.0, max_seconds=0.0,
            total_seconds=0.0,
        )

        lines = format_report(summary).splitlines()

        assert lines[0] == "Min: 0.000000 seconds  Warmups: 0"
        assert lines[1] == "Avg: 0.000000 seconds  Runs: 0"
        assert lines[2] == "Max: 0.000000 seconds  Fails: 0"


class TestFormatJson:
    """Tests for the JSON summary."""

    def test_fields(self) -> None:
        """Test that JSON output carries the summary fields."""
        data = json.loads(format_json(_summary(failures=1)))

        assert data["command"] == ["sleep", "1"]
        assert data["runs"] == 4
        assert data["failures"] == 1
        assert data["min_seconds"] == 1.0018321


class TestExitCode:
    """Tests for exit status derivation."""

    def test_no_failures(self) -> None:
        assert exit_code(_summary()) == 0

    def test_any_failure(self) -> None:
        assert exit_code(_summary(failures=1)) == 1

    def test_zero_runs_is_not_an_error(self) -> None:
        assert exit_code(_summary(runs=0)) == 0
