"""Settings loaded from environment variables.

TASKLIST_FILE       path of the JSON task file (default: ./tasklist.json)
TASKLIST_LOG_LEVEL  console log level name (default: WARNING)

Color switches (NO_COLOR / FORCE_COLOR) are read by theme.py.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TASKLIST"
DEFAULT_FILE = Path("tasklist.json")


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_level(name: str, default: int) -> int:
    raw: Optional[str] = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    tasks_file: Path = DEFAULT_FILE
    log_level: int = logging.WARNING


def load_settings() -> Settings:
    return Settings(
        tasks_file=_env_path(_k("FILE"), DEFAULT_FILE),
        log_level=_env_level(_k("LOG_LEVEL"), logging.WARNING),
    )
