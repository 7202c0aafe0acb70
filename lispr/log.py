"""Colored console logging for the lispr driver.

Records are rendered as `[lispr] <level>: message`, with the level name
colored by severity.
"""

from __future__ import annotations

import logging
import sys

RED = "\x1b[1;31m"
GRN = "\x1b[1;32m"
YEL = "\x1b[1;33m"
GRY = "\x1b[1;30m"
RESET = "\x1b[0m"

LEVEL_STYLES = {
    logging.DEBUG: (GRY, "DEBUG"),
    logging.INFO: (GRN, "info"),
    logging.WARNING: (YEL, "warning"),
    logging.ERROR: (RED, "error"),
    logging.CRITICAL: (RED, "error"),
}


class ColorFormatter(logging.Formatter):
    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color, label = LEVEL_STYLES.get(record.levelno, ("", record.levelname.lower()))
        if self.use_color:
            label = f"{color}{label}:{RESET}"
        else:
            label = f"{label}:"
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"[lispr] {label} {message}"


def configure_logging(level: int = logging.WARNING, stream=None) -> logging.Handler:
    """Install a single colored stderr handler on the `lispr` logger."""
    stream = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))

    logger = logging.getLogger("lispr")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
