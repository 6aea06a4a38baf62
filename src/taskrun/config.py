# src/taskrun/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Bad values never crash startup: they fall back to defaults.
- Settings are injectable; tests build their own instead of reading os.environ.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKRUN"

STRATEGIES = ("threads", "cooperative", "asyncio", "sequential")
DEFAULT_STRATEGY = "threads"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or value < 0:
        return default
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("%s=%r is not one of %s; using %r", name, raw, ", ".join(choices), default)
        return default
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool
    data_dir: Path

    # ---- Runner ----
    strategy: str
    time_unit: float
    show_times: bool

    @property
    def log_file(self) -> Path:
        return self.data_dir / "taskrun.log"

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "taskrun") or "taskrun",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskrun")),
            strategy=_env_choice(_k("STRATEGY"), STRATEGIES, DEFAULT_STRATEGY),
            time_unit=_env_float(_k("TIME_UNIT"), 1.0),
            show_times=_env_bool(_k("SHOW_TIMES"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
