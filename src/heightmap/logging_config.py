# src/heightmap/logging_config.py
"""
Root logging setup for the heightmap-hike driver and scripts.

Loggers used in this package:
- heightmap.search   DEBUG: search start, goal/unreachable, closed counts
- heightmap.queries  INFO: parse timing, unreachable queries
- heightmap.trace    INFO: one line per query from SearchTracer

The level may be an int or a level name taken straight from
config/heightmap.yaml ("debug", "INFO", ...).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Turn a level name or number into a logging level int."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(
    level: int | str = logging.INFO,
    *,
    stream: Optional[TextIO] = None,
) -> bool:
    """
    Attach one StreamHandler to the root logger unless it already has one.

    Returns True when a handler was installed, False when logging was
    already configured elsewhere (tests, embedding applications).
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    resolved = resolve_level(level)
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolved)
    return True
