"""Settings read from environment variables.

Palette and color detection variables (NO_COLOR, FORCE_COLOR, COLORTERM,
TASKMGR_PRIMARY, ...) are read by theme.py at import; this module covers
the rest.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

ENV_PREFIX = "TASKMGR"
DEFAULT_LOG_LEVEL = "WARNING"
COLOR_MODES: Tuple[str, ...] = ("auto", "always", "never")


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def parse_log_level(name: Optional[str], default: str = DEFAULT_LOG_LEVEL) -> int:
    """Map a level name like "info" to its logging constant; unknown names fall back to `default`."""
    raw = (name or default).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    return logging.getLevelName(default)


def _color_mode(value: Optional[str]) -> str:
    if value is None:
        return "auto"
    value = value.strip().lower()
    if value in COLOR_MODES:
        return value
    # boolean spellings are accepted too
    return "never" if value in {"0", "false", "no", "off", ""} else "always"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    color: str = "auto"


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv(_k("LOG_LEVEL")) or DEFAULT_LOG_LEVEL,
        color=_color_mode(os.getenv(_k("COLOR"))),
    )
