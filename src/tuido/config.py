"""Settings loaded from environment variables.

TUIDO_FILE       task file (default ~/.tuido/tasks.json)
TUIDO_LOG_FILE   log file (default ~/.tuido/tuido.log)
TUIDO_LOG_LEVEL  logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .models import DEFAULT_LOG_PATH, DEFAULT_PATH

ENV_PREFIX = "TUIDO"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return Path(default)
    return Path(raw.strip()).expanduser()


def _env_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    tasks_path: Path
    log_path: Path
    log_level: int

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_path=_env_path(_k("FILE"), DEFAULT_PATH),
            log_path=_env_path(_k("LOG_FILE"), DEFAULT_LOG_PATH),
            log_level=_env_level(_k("LOG_LEVEL"), logging.INFO),
        )
