from __future__ import annotations

import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler


def _parse_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = int(raw)
        if val < 1:
            return default
        return val
    except ValueError:
        return default


def setup_logging(level_name: str | None = None) -> None:
    """
    Configure logging for the command line and the example scripts.

    Env vars:
    - TLYRICS_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR (default: WARNING)
    - TLYRICS_LOG_FILE: optional path to a log file
    - TLYRICS_LOG_ROTATE_BYTES: max file size before rotation (default: 1048576)
    - TLYRICS_LOG_BACKUP_COUNT: number of rotated files to keep (default: 3)
    """
    level_name = (level_name or os.getenv("TLYRICS_LOG_LEVEL") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    log_file = os.getenv("TLYRICS_LOG_FILE")
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=_parse_int_env("TLYRICS_LOG_ROTATE_BYTES", 1024 * 1024),
            backupCount=_parse_int_env("TLYRICS_LOG_BACKUP_COUNT", 3),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
