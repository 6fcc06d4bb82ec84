"""
Driver configuration for the minexpr command line.

Settings come from an optional ``minexpr.toml`` file:

    [driver]
    show_tokens = true
    show_tree = true
    prompt = "Expression: "
    log_level = "WARNING"

The MINEXPR_LOG_LEVEL environment variable overrides ``log_level``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from minexpr.core.errors import ConfigError

CONFIG_FILENAME = "minexpr.toml"

LOG_LEVEL_ENV_VAR = "MINEXPR_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DriverConfig:
    """What the driver prints and how it logs."""

    show_tokens: bool = True
    show_tree: bool = True
    prompt: str = "Expression: "
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _normalize_level(value: object, source: str) -> str:
    level = str(value).upper().strip()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log level {value!r} in {source}")
    return level


def find_config(start: Path) -> Path | None:
    """Return ``start/minexpr.toml`` if it exists."""
    candidate = start / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None) -> DriverConfig:
    """Load driver settings from ``path`` and the environment.

    A missing or absent file yields the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds an unknown
            log level.
    """
    data: dict = {}
    if path is not None and path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

    driver = data.get("driver", {})
    config = DriverConfig(
        show_tokens=bool(driver.get("show_tokens", True)),
        show_tree=bool(driver.get("show_tree", True)),
        prompt=str(driver.get("prompt", "Expression: ")),
        log_level=_normalize_level(driver.get("log_level", "WARNING"), str(path)),
    )

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if env_level:
        config.log_level = _normalize_level(env_level, LOG_LEVEL_ENV_VAR)

    return config
