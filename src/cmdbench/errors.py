# Copyright (c) Syntropy Systems
"""Exception types raised by cmdbench."""


class CmdbenchError(Exception):
    """Base class for cmdbench errors."""


class ConfigError(CmdbenchError):
    """Invalid benchmark configuration or config file."""


class ClockError(CmdbenchError):
    """The monotonic time source is unavailable.

    Fatal: no duration can be measured without it.
    """
