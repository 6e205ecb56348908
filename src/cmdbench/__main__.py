# Copyright (c) Syntropy Systems
"""Allow ``python -m cmdbench``."""

from cmdbench.cli.main import app

app(prog_name="cmdbench")
