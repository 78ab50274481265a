"""
Height-map navigation.

Provides:
- HeightGrid: immutable elevation grid with start/end markers
- Adjacency rules: ascent_limited_neighbors / descent_limited_neighbors
- Uniform-cost search: find_path
- Queries: climb_to_end, shortest_hike, run_queries
- Parsing: parse_heightmap, load_heightmap
"""

from __future__ import annotations

from .grid import (
    HeightGrid,
    HeightMapError,
    InvalidShapeError,
    OutOfBoundsError,
    Position,
)
from .adjacency import (
    Direction,
    NeighborFn,
    ascent_limited_neighbors,
    descent_limited_neighbors,
    neighbors_for,
)
from .search import GoalFn, PathStep, SearchNode, SearchResult, find_path
from .parse import HeightMapParseError, load_heightmap, parse_heightmap
from .queries import QueryReport, climb_to_end, run_queries, shortest_hike
from .tracing import SearchTraceRecord, SearchTracer

__all__ = [
    "HeightGrid",
    "HeightMapError",
    "InvalidShapeError",
    "OutOfBoundsError",
    "Position",
    "Direction",
    "NeighborFn",
    "ascent_limited_neighbors",
    "descent_limited_neighbors",
    "neighbors_for",
    "GoalFn",
    "PathStep",
    "SearchNode",
    "SearchResult",
    "find_path",
    "HeightMapParseError",
    "load_heightmap",
    "parse_heightmap",
    "QueryReport",
    "climb_to_end",
    "run_queries",
    "shortest_hike",
    "SearchTraceRecord",
    "SearchTracer",
]
