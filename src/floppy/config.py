"""Configuration loading from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DB_FILE


@dataclass(frozen=True)
class GameConfig:
    width: int = 480
    height: int = 640
    fps: int = 60
    db_path: str = DB_FILE
    log_level: str = "info"
    log_file: str | None = None
    muted: bool = False


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config(dotenv: bool = True) -> GameConfig:
    """Build a GameConfig from FLOPPY_* environment variables."""
    if dotenv:
        load_dotenv()
    return GameConfig(
        width=_int_env("FLOPPY_WIDTH", 480),
        height=_int_env("FLOPPY_HEIGHT", 640),
        fps=_int_env("FLOPPY_FPS", 60),
        db_path=os.getenv("FLOPPY_DB", DB_FILE),
        log_level=os.getenv("FLOPPY_LOG_LEVEL", "info"),
        log_file=os.getenv("FLOPPY_LOG_FILE") or None,
        muted=_bool_env("FLOPPY_MUTED", False),
    )
