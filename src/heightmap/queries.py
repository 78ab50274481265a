# src/heightmap/queries.py
"""
The two height-map questions, expressed over the generic search engine.

- climb_to_end: fewest steps from the start marker to the end marker,
  climbing at most one unit per step.
- shortest_hike: fewest steps from any lowest cell to the end marker,
  found by searching backwards from the end with the reversed rule.

run_queries() runs both and times them through a SearchTracer; timed_load()
times the parse step that precedes them.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .adjacency import Direction, neighbors_for
from .grid import HeightGrid, Position
from .search import SearchResult, find_path
from .tracing import SearchTracer, SearchTraceRecord

logger = logging.getLogger(__name__)

LOWEST_ELEVATION = 0


def climb_to_end(grid: HeightGrid) -> SearchResult:
    """Path from the start marker up to the end marker."""
    return find_path(
        grid,
        grid.start,
        lambda pos: pos == grid.end,
        neighbors_for(Direction.FORWARD),
    )


def shortest_hike(grid: HeightGrid) -> SearchResult:
    """Path from the end marker back to the nearest elevation-0 cell."""
    return find_path(
        grid,
        grid.end,
        lambda pos: grid.elevation_at(pos) == LOWEST_ELEVATION,
        neighbors_for(Direction.REVERSE),
    )


@dataclass
class QueryReport:
    """Both query results plus their trace records."""

    climb: SearchResult
    hike: SearchResult
    climb_trace: Optional[SearchTraceRecord] = None
    hike_trace: Optional[SearchTraceRecord] = None
    parse_duration_s: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        """JSON-safe summary, one entry per query plus parse timing."""
        return {
            "parse": {"duration_s": self.parse_duration_s},
            "climb_to_end": _summary(self.climb, self.climb_trace),
            "shortest_hike": _summary(self.hike, self.hike_trace),
        }


def _summary(result: SearchResult, trace: Optional[SearchTraceRecord]) -> Dict[str, Any]:
    return {
        "success": result.success,
        "steps": result.steps,
        "goal": list(result.goal) if result.goal is not None else None,
        "reason": result.reason,
        "expanded": result.expanded,
        "duration_s": trace.duration_s if trace is not None else None,
    }


def _timed(
    tracer: SearchTracer,
    name: str,
    query: Callable[[HeightGrid], SearchResult],
    grid: HeightGrid,
    source: Position,
) -> tuple[SearchResult, Optional[SearchTraceRecord]]:
    t0 = time.perf_counter()
    result = query(grid)
    duration = time.perf_counter() - t0

    if not result.success:
        logger.info("%s: no path from %s (%s)", name, source, result.reason)

    return result, tracer.record(query=name, source=source, result=result, duration_s=duration)


def run_queries(
    grid: HeightGrid,
    tracer: Optional[SearchTracer] = None,
    *,
    parse_duration_s: Optional[float] = None,
) -> QueryReport:
    """
    Run climb_to_end and shortest_hike on the same grid.

    The grid is shared read-only; each search owns its own open/closed sets.
    """
    tracer = tracer or SearchTracer()

    climb, climb_trace = _timed(tracer, "climb_to_end", climb_to_end, grid, grid.start)
    hike, hike_trace = _timed(tracer, "shortest_hike", shortest_hike, grid, grid.end)

    return QueryReport(
        climb=climb,
        hike=hike,
        climb_trace=climb_trace,
        hike_trace=hike_trace,
        parse_duration_s=parse_duration_s,
    )


def timed_load(
    load: Callable[..., HeightGrid],
    *args: Any,
    **kwargs: Any,
) -> tuple[HeightGrid, float]:
    """
    Call a grid loader (parse_heightmap, load_heightmap) and time it.

    Returns the grid and the elapsed seconds; loader errors propagate.
    """
    t0 = time.perf_counter()
    grid = load(*args, **kwargs)
    duration = time.perf_counter() - t0
    logger.info("parse: %dx%d grid in %.6fs", grid.height, grid.width, duration)
    return grid, duration
