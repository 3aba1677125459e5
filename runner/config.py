"""Environment-variable-based configuration for the plan runner."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from triathlon_engine.exceptions import ConfigError

PLAN_PROFILE_PATH: Path | None = (
    Path(os.environ["PLAN_PROFILE"]).expanduser() if os.environ.get("PLAN_PROFILE") else None
)
PLAN_HISTORY_PATH: Path | None = (
    Path(os.environ["PLAN_HISTORY"]).expanduser() if os.environ.get("PLAN_HISTORY") else None
)
DEFAULT_TIMEZONE: str = os.environ.get("DEFAULT_TIMEZONE", "Europe/Prague")
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
PLAN_OUTPUT_FORMAT: str = os.environ.get("PLAN_OUTPUT_FORMAT", "text")

OUTPUT_FORMATS = ("text", "json")


def load_log_level(name: str | None = None) -> int:
    """Resolve a logging level name (``"debug"``, ``"INFO"``) to its number."""
    name = (name or LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return level


def load_output_format(name: str | None = None) -> str:
    fmt = (name or PLAN_OUTPUT_FORMAT).lower()
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(f"PLAN_OUTPUT_FORMAT must be one of {OUTPUT_FORMATS}, got {fmt!r}")
    return fmt
