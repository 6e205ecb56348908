# Copyright (c) Syntropy Systems
"""Configuration management for cmdbench."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import yaml

from cmdbench.errors import ConfigError
from cmdbench.models.bench import DEFAULT_DURATION, DEFAULT_WARMUPS

CONFIG_FILENAME = ".cmdbench.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CmdbenchConfig:
    """Defaults applied when an option is not given on the command line."""

    # Warmup runs before measuring
    warmups: int = DEFAULT_WARMUPS

    # Measurement window in seconds
    duration: float = DEFAULT_DURATION

    # Level for cmdbench's own diagnostics
    log_level: str = "WARNING"


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find the nearest .cmdbench.yaml by walking up from start_path.

    Returns None if no config file is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def get_global_config_path() -> Path:
    """Get the global config file (~/.cmdbench/config.yaml)."""
    return Path.home() / ".cmdbench" / "config.yaml"


def load_config(config_path: Path | None = None) -> CmdbenchConfig:
    """Load configuration from a YAML file or defaults.

    Looks for config in:
    1. Provided config_path (must exist)
    2. Nearest .cmdbench.yaml walking up from the cwd
    3. ~/.cmdbench/config.yaml
    4. Defaults

    Values of the wrong type are ignored. Range checks happen later, when
    the values are turned into a BenchConfig.
    """
    config = CmdbenchConfig()

    if config_path is not None:
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg)
    else:
        config_path = find_config_file()
        if config_path is None:
            global_config = get_global_config_path()
            if global_config.is_file():
                config_path = global_config

    if config_path is None:
        return config

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not read config file {config_path}: {e}"
        raise ConfigError(msg) from e

    if not isinstance(data, dict):
        msg = f"Config file {config_path} must contain a mapping"
        raise ConfigError(msg)
    data = cast("dict[str, object]", data)

    warmups = data.get("warmups")
    if isinstance(warmups, int) and not isinstance(warmups, bool):
        config.warmups = warmups
    duration = data.get("duration")
    if isinstance(duration, (int, float)) and not isinstance(duration, bool):
        config.duration = float(duration)
    log_level = data.get("log_level")
    if isinstance(log_level, str) and log_level.upper() in LOG_LEVELS:
        config.log_level = log_level.upper()

    return config
