# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for cmdbench."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeAlias

CommandArgv: TypeAlias = Sequence[str]


class FrozenModel(BaseModel):
    """Base model for values that never change after construction."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="forbid",
        frozen=True,
    )
