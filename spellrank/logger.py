"""
Package-wide logging for spellrank.

All records go to ``$SPELLRANK_LOG_DIR/spellrank.log`` (default
``~/.spellrank/logs``) through a size-capped ``RotatingFileHandler``.  The
level comes from the ``log_level`` config key or ``--log-level``; when no
file can be opened the package logs to a ``NullHandler`` instead.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path(os.environ.get("SPELLRANK_LOG_DIR") or Path.home() / ".spellrank" / "logs")
LOG_FILE = LOG_DIR / "spellrank.log"
LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 1 * 1024 * 1024
BACKUP_COUNT = 2
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Modules log through children such as ``spellrank.ranker``.
_ROOT_LOGGER_NAME = "spellrank"

_initialized = False


def _ensure_log_dir() -> bool:
    """Create the logs directory if it does not exist."""
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return True


def _setup_root_logger(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Configure the root package logger (idempotent)."""
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)

    if _initialized:
        return root

    root.setLevel(_resolve_level(level))
    # Library messages stay out of the host application's root logger.
    root.propagate = False

    if _ensure_log_dir():
        try:
            fh = RotatingFileHandler(
                str(LOG_FILE),
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root.addHandler(fh)
        except OSError:
            # No writable log location: keep working without a file handler.
            pass

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    _initialized = True
    return root


def _resolve_level(level: str) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``spellrank.<name>``, setting up the package logger on first use."""
    _setup_root_logger()
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def set_log_level(level: str) -> None:
    """Change the effective log level for the whole package at runtime."""
    root = _setup_root_logger(level)
    root.setLevel(_resolve_level(level))
    root.info("Log level changed to %s", (level or DEFAULT_LOG_LEVEL).upper())
