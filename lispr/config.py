from __future__ import annotations
import logging
import os
from pathlib import Path

# Defaults
_DEFAULT_HISTFILE = ".lispr_hist"
_DEFAULT_LOG_LEVEL = "WARNING"


def path_from_env(var: str, default: str) -> Path:
    raw = os.environ.get(var, "").strip()
    return Path(raw) if raw else Path(default)


def get_history_path() -> Path:
    """REPL history file, relative to the working directory unless absolute."""
    return path_from_env("LISPR_HISTFILE", _DEFAULT_HISTFILE)


def get_log_level() -> int:
    """Log level used when --debug is not given; unknown names fall back to WARNING."""
    name = os.environ.get("LISPR_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
