"""
Logging configuration for menuboard.

The terminal belongs to the Textual app, so records go to a debug log file
and to the Textual devtools console instead of stdout.

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)
    MENUBOARD_LOG_PATH: log file location (default: /tmp/menuboard-debug.log)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textual.logging import TextualHandler

from menuboard.config import resolve_log_path

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None, log_path: str | None = None) -> None:
    """Configure logging once at startup."""
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    if level not in _VALID_LEVELS:
        level = "INFO"
    numeric_level = getattr(logging, level)

    handlers: list[logging.Handler] = [TextualHandler()]
    log_file = Path(log_path or resolve_log_path())
    file_error: OSError | None = None
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError as exc:
        file_error = exc

    logging.basicConfig(
        level=numeric_level,
        format=_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
    logging.getLogger("menuboard").setLevel(numeric_level)

    logger = logging.getLogger(__name__)
    if file_error is not None:
        logger.warning("Debug log file %s unavailable, logging to the Textual console only: %s", log_file, file_error)
    logger.debug("Logging configured at %s level, file %s", level, log_file)
