"""Runtime settings loaded from an optional ``gol.toml``.

Every key is optional; a missing file yields the defaults below. The file
location can be overridden with the ``GOL_SETTINGS`` environment variable.
"""

from __future__ import annotations

import math
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config_loader import DEFAULT_MAX_DIMENSION
from .errors import SettingsError

SETTINGS_FILE = "gol.toml"
SETTINGS_ENV_VAR = "GOL_SETTINGS"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    default_config: Path = Path("default.txt")
    interval: float = 1.0
    initial_delay: float = 1.0
    max_dimension: int = DEFAULT_MAX_DIMENSION
    log_level: str = "WARNING"
    log_file: Path | None = None


def settings_path() -> Path:
    return Path(os.environ.get(SETTINGS_ENV_VAR, SETTINGS_FILE))


def load_settings(path: str | Path | None = None) -> Settings:
    """Read settings from ``path`` (or the default location) if it exists."""
    path = Path(path) if path is not None else settings_path()
    if not path.exists():
        return Settings()

    try:
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Malformed settings file {path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Could not read settings file {path}: {e}") from e

    s = _table(cfg, "simulation")
    b = _table(cfg, "board")
    o = _table(cfg, "output")
    defaults = Settings()

    interval = _number(s, "interval", defaults.interval)
    initial_delay = _number(s, "initial_delay", defaults.initial_delay)
    max_dimension = b.get("max_dimension", defaults.max_dimension)
    if isinstance(max_dimension, bool) or not isinstance(max_dimension, int) or max_dimension < 1:
        raise SettingsError(f"board.max_dimension must be a positive integer, got {max_dimension!r}")

    log_level = str(o.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise SettingsError(f"output.log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
    log_file = o.get("log_file", "")
    if not isinstance(log_file, str):
        raise SettingsError(f"output.log_file must be a string, got {log_file!r}")

    return Settings(
        default_config=Path(_string(s, "default_config", str(defaults.default_config))),
        interval=interval,
        initial_delay=initial_delay,
        max_dimension=max_dimension,
        log_level=log_level,
        log_file=Path(log_file) if log_file else None,
    )


def _table(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    table = cfg.get(name, {})
    if not isinstance(table, dict):
        raise SettingsError(f"[{name}] must be a table")
    return table


def _number(table: dict[str, Any], key: str, default: float) -> float:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"{key} must be a finite non-negative number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise SettingsError(f"{key} must be a finite non-negative number, got {value!r}")
    return float(value)


def _string(table: dict[str, Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str) or not value:
        raise SettingsError(f"{key} must be a non-empty string, got {value!r}")
    return value
