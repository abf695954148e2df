from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

# Defaults
DEFAULT_PROMPT = "user> "
DEFAULT_HISTORY_FILE = Path.home() / ".pebble_history"
DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw


def get_prompt() -> str:
    return value_from_env("PEBBLE_PROMPT", DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    """History file for the REPL; an empty PEBBLE_HISTORY_FILE disables history."""
    raw = value_from_env("PEBBLE_HISTORY_FILE", str(DEFAULT_HISTORY_FILE)).strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def get_log_level() -> int:
    name = value_from_env("PEBBLE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
