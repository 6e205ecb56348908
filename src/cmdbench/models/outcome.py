# Copyright (c) Syntropy Systems
"""Outcome of a single command invocation."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import FrozenModel

# Exit status a shell reports when a program cannot be executed.
COMMAND_NOT_FOUND_EXIT_CODE = 127


class OutcomeKind(str, Enum):
    """How a single invocation ended."""

    SUCCESS = "success"
    FAILURE = "failure"
    SYSTEM_ERROR = "system_error"


class RunOutcome(FrozenModel):
    """Tagged result of one invocation.

    ``exit_code`` is the child's exit status, or the negative signal number
    when it was killed by a signal. It is None when no child was reaped.
    """

    kind: OutcomeKind
    duration: float = Field(default=0.0, ge=0.0)
    reason: str | None = None
    exit_code: int | None = None

    @property
    def is_failure(self) -> bool:
        """True for failures and system errors."""
        return self.kind is not OutcomeKind.SUCCESS

    @classmethod
    def success(cls, duration: float) -> RunOutcome:
        return cls(kind=OutcomeKind.SUCCESS, duration=duration, exit_code=0)

    @classmethod
    def failure(
        cls, duration: float, exit_code: int | None, reason: str | None = None
    ) -> RunOutcome:
        return cls(
            kind=OutcomeKind.FAILURE,
            duration=duration,
            exit_code=exit_code,
            reason=reason,
        )

    @classmethod
    def system_error(cls, reason: str, duration: float = 0.0) -> RunOutcome:
        return cls(kind=OutcomeKind.SYSTEM_ERROR, duration=duration, reason=reason)
