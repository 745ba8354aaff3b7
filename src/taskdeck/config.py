# src/taskdeck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing here touches the task engine; these are presentation/ambient knobs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import Priority

ENV_PREFIX = "TASKDECK"

logger = logging.getLogger(__name__)


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


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_priority(name: str, default: Priority) -> Priority:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return Priority.parse(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, raw, default.value)
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Task defaults / rendering ----
    default_priority: Priority
    compact: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "taskdeck") or "taskdeck",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskdeck")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            default_priority=_env_priority(_k("DEFAULT_PRIORITY"), Priority.MEDIUM),
            compact=_env_bool(_k("COMPACT"), False),
        )


load_dotenv(override=False)

SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "COMPACT"):
        object.__setattr__(SETTINGS, "compact", bool(_config_local.COMPACT))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
