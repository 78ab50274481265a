# neighbour rules for forward and reverse height-map searches
# src/heightmap/adjacency.py
"""
Adjacency strategies over HeightGrid.

A strategy is any callable `neighbors(grid, pos) -> list[Position]`.
Two are provided:

- ascent_limited_neighbors: climb at most one unit per step, descend freely.
  Used when walking from start to end.
- descent_limited_neighbors: the same rule traversed backwards, i.e. drop at
  most one unit per step, climb freely. Used when searching outward from
  the end cell.

Bounds are always checked (via HeightGrid.neighbors_4dir) before any
elevation lookup.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from .grid import HeightGrid, Position

# Signature for a neighbour-generation rule:
#   neighbors(grid, pos) -> reachable in-bounds positions
NeighborFn = Callable[[HeightGrid, Position], List[Position]]


class Direction(Enum):
    """Which way a search walks relative to the climbing rule."""

    FORWARD = "forward"
    REVERSE = "reverse"


def ascent_limited_neighbors(grid: HeightGrid, pos: Position) -> List[Position]:
    """Neighbours whose elevation is at most one above pos."""
    limit = grid.elevation_at(pos) + 1
    return [n for n in grid.neighbors_4dir(pos) if grid.elevation_at(n) <= limit]


def descent_limited_neighbors(grid: HeightGrid, pos: Position) -> List[Position]:
    """
    Neighbours whose elevation is at least one below pos.

    The floor saturates at zero so elevation-0 cells accept every neighbour.
    """
    floor = max(0, grid.elevation_at(pos) - 1)
    return [n for n in grid.neighbors_4dir(pos) if grid.elevation_at(n) >= floor]


_STRATEGIES: Dict[Direction, NeighborFn] = {
    Direction.FORWARD: ascent_limited_neighbors,
    Direction.REVERSE: descent_limited_neighbors,
}


def neighbors_for(direction: Direction | str) -> NeighborFn:
    """
    Return the neighbour rule for a direction.

    Accepts either a Direction or its string value ("forward"/"reverse").
    """
    try:
        key = Direction(direction)
    except ValueError:
        raise ValueError(f"Unknown search direction: {direction!r}") from None
    return _STRATEGIES[key]
