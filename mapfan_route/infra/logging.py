# mapfan_route/infra/logging.py
# -*- coding: utf-8 -*-

"""
Central logging configuration for the project.

This is the single source of truth for how logging is configured.

Usage
-----
    from mapfan_route.infra.logging import init_logging, get_logger

    init_logging(level="INFO")
    log = get_logger(__name__)
    log.info("Hello from my module")

Logs go to stderr by default: stdout is reserved for the route JSON.

Environment
-----------
- MAPFAN_LOG_LEVEL, if set, overrides the `level` parameter.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

# ────────────────────────────────────────────────────────────────────────────────
# Globals
# ────────────────────────────────────────────────────────────────────────────────

_current_log_file: Optional[Path] = None


# ────────────────────────────────────────────────────────────────────────────────
# Public helpers
# ────────────────────────────────────────────────────────────────────────────────

def get_current_log_path() -> Optional[Path]:
    """
    Return the path to the *current* log file, if any.

    - If no file handler is configured, returns None.
    - Useful for CLIs that want to print "Log file → ..." after init_logging().
    """
    global _current_log_file

    if _current_log_file is not None:
        return _current_log_file

    # Fallback: inspect root handlers (in case logging was configured elsewhere)
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            _current_log_file = Path(handler.baseFilename)
            return _current_log_file
    return None


def init_logging(
      level: str = "INFO"
    , *
    , force: bool = True
    , log_file: Optional[Path] = None
    , stream: Optional[TextIO] = None
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str, default "INFO"
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        If environment variable MAPFAN_LOG_LEVEL is set, it overrides this.
    force : bool, default True
        If True, existing handlers on the root logger are removed before
        applying the new configuration. Useful for CLIs/tests.
    log_file : Optional[Path]
        If provided, logs are written to this file *in addition* to the stream.
        Parent directory is created automatically.
    stream : Optional[TextIO]
        Stream for the console handler. Defaults to sys.stderr.
    """
    global _current_log_file

    env_level = os.getenv("MAPFAN_LOG_LEVEL")
    if env_level:
        level = env_level

    # Translate string level to numeric level (fallback to INFO if invalid)
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)

    root.setLevel(numeric_level)

    # [YYYY-MM-DD HH:MM:SS][LEVEL][logger.name] message
    formatter = logging.Formatter(
          fmt="[{asctime}][{levelname}][{name}] {message}"
        , datefmt="%Y-%m-%d %H:%M:%S"
        , style="{"
    )

    stream_handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    _current_log_file = None

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

        _current_log_file = log_file.resolve()

    log = get_logger(__name__)
    log.debug("Logging configured (level=%s)", logging.getLevelName(numeric_level))


def get_logger(
    name: Optional[str] = None
) -> logging.Logger:
    """
    Convenience wrapper around logging.getLogger.

    New modules should use this instead of calling logging.getLogger()
    directly, so if the logging backend ever changes, only this module
    needs to be updated.
    """
    return logging.getLogger(name if name is not None else __name__)
