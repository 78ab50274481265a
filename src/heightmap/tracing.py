# src/heightmap/tracing.py
"""
Tracing and timing for height-map queries.

Keeps a rolling buffer of one record per query run and emits a single
structured log line per record, so a driver can report timings without
the engine knowing about clocks or output.

It does NOT:
- Run searches
- Print results
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from .grid import Position
from .search import SearchResult


@dataclass
class SearchTraceRecord:
    """Structured record of a single query run."""

    timestamp: float           # wall-clock time (time.time())
    duration_s: float          # search duration in seconds

    query: str
    source: Position
    goal: Optional[Position]

    success: bool
    steps: Optional[int]
    expanded: int


class SearchTracer:
    """
    In-memory query tracer with optional logging.

    Responsibilities:
    - Keep a rolling buffer of recent SearchTraceRecord entries.
    - Emit a single structured log line per query (info level).
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 10_000,
    ) -> None:
        self._logger = logger or logging.getLogger("heightmap.trace")
        self._records: Deque[SearchTraceRecord] = deque(maxlen=max_records)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record(
        self,
        *,
        query: str,
        source: Position,
        result: SearchResult,
        duration_s: float,
    ) -> Optional[SearchTraceRecord]:
        """
        Record a trace for a completed query.

        Call this for unreachable results too; `success` captures outcome.
        """
        try:
            record = SearchTraceRecord(
                timestamp=time.time(),
                duration_s=float(duration_s),
                query=query,
                source=source,
                goal=result.goal,
                success=bool(result.success),
                steps=result.steps,
                expanded=int(result.expanded),
            )
        except Exception:
            # Tracing must never crash the caller.
            self._logger.exception("Failed to build SearchTraceRecord")
            return None

        self._records.append(record)

        self._logger.info(
            "query=%s success=%s steps=%s goal=%s expanded=%d duration=%.6fs",
            record.query,
            record.success,
            record.steps,
            record.goal,
            record.expanded,
            record.duration_s,
        )
        return record

    def get_records(self) -> List[SearchTraceRecord]:
        """Return a snapshot of all currently buffered records."""
        return list(self._records)
