from __future__ import annotations
import logging
import os
from typing import Optional


# Defaults
_DEFAULT_PROMPT = "user> "
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    return os.environ.get('MALLOW_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = value_from_env('MALLOW_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level x" string for unknown names
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)


def get_recursion_limit() -> Optional[int]:
    raw = value_from_env('MALLOW_RECURSION_LIMIT', None)
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
