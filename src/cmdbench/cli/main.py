# Copyright (c) Syntropy Systems
"""Main CLI entry point for cmdbench."""

import typer

from cmdbench.cli.bench import bench

app = typer.Typer(
    name="cmdbench",
    help="Time a command by running it repeatedly for a fixed duration.",
    add_completion=False,
)

# Everything after the first non-option argument belongs to the command
_ = app.command(
    context_settings={"allow_extra_args": True, "allow_interspersed_args": False}
)(bench)


if __name__ == "__main__":
    app()
