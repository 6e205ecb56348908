# Copyright (c) Syntropy Systems
"""cmdbench command."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cmdbench.config import LOG_LEVELS, load_config
from cmdbench.errors import ClockError, ConfigError
from cmdbench.models.bench import BenchConfig
from cmdbench.report import exit_code, format_json, format_report
from cmdbench.scheduler import Benchmark

console = Console()
err_console = Console(stderr=True)

USAGE = "Usage: cmdbench [OPTIONS] -- COMMAND [ARGS]..."
EXAMPLE = "Example: cmdbench -w 2 -d 4 -- sleep 1"
EXIT_INTERRUPTED = 130

_FIELD_LABELS = {
    "warmups": "warmup count",
    "duration": "duration (seconds)",
}


def bench(
    ctx: typer.Context,
    warmups: Optional[int] = typer.Option(
        None,
        "--warmups", "-w",
        envvar="CMDBENCH_WARMUPS",
        help="Warmup runs before measuring, excluded from stats [default: 0]",
        show_default=False,
    ),
    duration: Optional[float] = typer.Option(
        None,
        "--duration", "-d",
        envvar="CMDBENCH_DURATION",
        help="Seconds to keep starting measured runs [default: 5.0]",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the summary as JSON",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        envvar="CMDBENCH_LOG_LEVEL",
        help="Level for cmdbench diagnostics (DEBUG shows every run)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML file with default warmups, duration and log_level",
    ),
) -> None:
    """Measure how long a command takes by running it repeatedly.

    Use -- to separate cmdbench options from the command:

        cmdbench -w 2 -d 4 -- sleep 1

    Runs the command --warmups times without recording anything, then keeps
    starting new runs until --duration seconds have passed. Exits nonzero if
    any measured run failed.
    """
    try:
        defaults = load_config(config_file)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    level = (log_level or defaults.log_level).upper()
    if level not in LOG_LEVELS:
        err_console.print(f"[red]Error:[/red] Invalid log level: {escape(str(log_level))}")
        raise typer.Exit(1)
    _configure_logging(level)

    try:
        config = BenchConfig(
            warmups=defaults.warmups if warmups is None else warmups,
            duration=defaults.duration if duration is None else duration,
        )
    except ValidationError as e:
        _print_validation_error(e)
        err_console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(1) from e

    # Get command from remaining args (after --)
    command_argv = list(ctx.args)
    if not command_argv:
        err_console.print("[red]Error:[/red] Missing command")
        err_console.print(USAGE, markup=False, highlight=False)
        err_console.print(EXAMPLE, markup=False, highlight=False)
        raise typer.Exit(1)

    benchmark = Benchmark(command_argv, config)
    try:
        summary = benchmark.run()
    except ClockError as e:
        err_console.print(f"[red]Fatal:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except KeyboardInterrupt as e:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(EXIT_INTERRUPTED) from e

    if json_output:
        console.print(format_json(summary), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(format_report(summary), markup=False, highlight=False, soft_wrap=True)

    raise typer.Exit(exit_code(summary))


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        level=getattr(logging, level),
        force=True,
    )


def _print_validation_error(error: ValidationError) -> None:
    """Print one line per invalid option, naming the rejected value."""
    for detail in error.errors():
        field = str(detail["loc"][0]) if detail["loc"] else ""
        label = _FIELD_LABELS.get(field, field)
        err_console.print(
            f"[red]Error:[/red] Invalid {label}: {escape(str(detail.get('input')))}",
            highlight=False,
        )
