# Copyright (c) Syntropy Systems
"""Run a command once and time it."""
from __future__ import annotations

import contextlib
import ctypes
import errno
import logging
import os
import signal
import subprocess
import sys
from typing import TYPE_CHECKING

from cmdbench.clock import Clock, MonotonicClock
from cmdbench.models.outcome import COMMAND_NOT_FOUND_EXIT_CODE, RunOutcome

if TYPE_CHECKING:
    from cmdbench.models.base import CommandArgv

logger = logging.getLogger(__name__)

PR_SET_PDEATHSIG = 1


def die_with_parent() -> None:
    """Ask the kernel to SIGKILL the child if cmdbench dies first.

    Runs in the child between fork and exec. Linux only; elsewhere, or if
    libc cannot be loaded, the child simply outlives an aborted benchmark.
    """
    try:
        libc = ctypes.CDLL("libc.so.6", use_errno=True)
        libc.prctl(PR_SET_PDEATHSIG, signal.SIGKILL)
    except (AttributeError, OSError):
        return


def run_once(command_argv: CommandArgv, clock: Clock | None = None) -> RunOutcome:
    """Run ``command_argv`` to completion and classify the result.

    The child inherits stdin, stdout and stderr. The returned duration spans
    process creation through reaping.

    Never raises for problems with the child itself: an exec failure is a
    failure with exit code 127, a fork or wait error is a system error.
    Clock errors and KeyboardInterrupt do propagate, the latter only after
    the child has been reaped.
    """
    if clock is None:
        clock = MonotonicClock()

    start = clock.now()
    try:
        process = subprocess.Popen(  # noqa: S603
            list(command_argv),
            preexec_fn=die_with_parent if sys.platform == "linux" else None,  # noqa: PLW1509
        )
    except OSError as e:
        if e.filename is None:
            # fork itself failed, no child ever existed
            logger.warning("Could not spawn %r: %s", command_argv[0], e)
            return RunOutcome.system_error("spawn failed")
        duration = clock.now() - start
        return _exec_failure(command_argv[0], e, duration)
    except ValueError as e:
        # argv Popen refuses outright, e.g. an embedded null byte
        logger.warning("Could not spawn %r: %s", command_argv[0], e)
        return RunOutcome.system_error("spawn failed")

    try:
        status = _wait_for_exit(process)
    except OSError as e:
        logger.warning("Waiting for pid %d failed: %s", process.pid, e)
        # Non-blocking: a child still running when waitpid fails for a reason
        # other than ECHILD stays unreaped until cmdbench exits
        with contextlib.suppress(OSError):
            _ = process.poll()
        return RunOutcome.system_error("wait failed")

    duration = clock.now() - start
    return _classify(status, duration)


def _exec_failure(program: str, error: OSError, duration: float) -> RunOutcome:
    """Outcome for a program that could not be executed.

    Reported the way a shell reports it: as an ordinary exit with status 127.
    """
    if error.errno == errno.ENOENT:
        reason = "command not found"
    else:
        reason = f"cannot execute: {error.strerror}"
    logger.error("%s: %s", program, reason)
    return RunOutcome.failure(duration, COMMAND_NOT_FOUND_EXIT_CODE, reason)


def _wait_for_exit(process: subprocess.Popen[bytes]) -> int:
    """Block until the child exits and return its exit code.

    Signal interruptions never abandon the wait. A KeyboardInterrupt is held
    back until the child has been reaped, then re-raised.
    """
    interrupted = False
    while True:
        try:
            _, status = os.waitpid(process.pid, 0)
        except InterruptedError:
            continue
        except KeyboardInterrupt:
            interrupted = True
            continue
        break

    code = os.waitstatus_to_exitcode(status)
    # Mark the Popen handle as reaped so it never waits on the pid again
    process.returncode = code
    if interrupted:
        raise KeyboardInterrupt
    return code


def _classify(code: int, duration: float) -> RunOutcome:
    if code == 0:
        return RunOutcome.success(duration)
    if code < 0:
        return RunOutcome.failure(duration, code, f"killed by signal {-code}")
    return RunOutcome.failure(duration, code, f"exit status {code}")
