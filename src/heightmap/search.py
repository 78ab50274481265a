# uniform-cost search over HeightGrid
# src/heightmap/search.py
"""
Uniform-cost pathfinding over HeightGrid.

- Every step costs 1, so this is Dijkstra specialised to unit weights
  (equivalently BFS driven by a priority queue).
- The neighbour rule and the goal test are both pluggable, so the same
  engine answers "start to end" and "end to nearest lowest cell".
- Equal-cost entries leave the queue in insertion order.

This function does not read files, print, or mutate the grid.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .adjacency import NeighborFn
from .grid import HeightGrid, Position

logger = logging.getLogger(__name__)

# Signature for a goal test: is_goal(pos) -> bool
GoalFn = Callable[[Position], bool]

# One path element: (position, elevation)
PathStep = Tuple[Position, int]


@dataclass(frozen=True)
class SearchNode:
    """A queued or finalised cell; parent is None only for the source."""

    position: Position
    parent: Optional[Position]
    cost: int


@dataclass
class SearchResult:
    """Structured result for a search attempt."""

    path: List[PathStep] = field(default_factory=list)
    success: bool = False
    goal: Optional[Position] = None
    reason: str | None = None
    expanded: int = 0

    @property
    def steps(self) -> Optional[int]:
        """Number of edges in the path, or None when unreachable."""
        if not self.success:
            return None
        return len(self.path) - 1

    @property
    def positions(self) -> List[Position]:
        return [pos for pos, _ in self.path]


def find_path(
    grid: HeightGrid,
    source: Position,
    is_goal: GoalFn,
    neighbors: NeighborFn,
) -> SearchResult:
    """
    Search from source for the cheapest cell satisfying is_goal.

    Returns a SearchResult with:
      - path: (position, elevation) pairs from source to goal, inclusive
      - success: False when no reachable cell satisfies is_goal
      - reason: "unreachable" on failure
      - expanded: number of cells closed during the search
    """
    # Fail fast on a bad source; this is a caller bug, not an outcome.
    grid.elevation_at(source)

    logger.debug("find_path: source=%s grid=%sx%s", source, grid.height, grid.width)

    counter = itertools.count()
    open_heap: List[Tuple[int, int, SearchNode]] = []
    heapq.heappush(open_heap, (0, next(counter), SearchNode(source, None, 0)))

    # Cheapest cost currently queued per position. Stands in for scanning
    # the heap before each push.
    best_open: Dict[Position, int] = {source: 0}

    closed: Dict[Position, SearchNode] = {}
    goal: Optional[Position] = None

    while open_heap:
        _, _, node = heapq.heappop(open_heap)
        current = node.position

        # Stale duplicate of an already-finalised cell.
        if current in closed:
            continue

        for nxt in neighbors(grid, current):
            if nxt in closed:
                continue

            tentative = node.cost + 1
            queued = best_open.get(nxt)
            if queued is not None and queued <= tentative:
                continue

            best_open[nxt] = tentative
            heapq.heappush(
                open_heap,
                (tentative, next(counter), SearchNode(nxt, current, tentative)),
            )

        closed[current] = node
        best_open.pop(current, None)

        if is_goal(current):
            goal = current
            break

    if goal is None:
        logger.debug("find_path: no goal reachable from %s (%d closed)", source, len(closed))
        return SearchResult(reason="unreachable", expanded=len(closed))

    path = _reconstruct_path(grid, closed, goal)
    logger.debug(
        "find_path: reached %s from %s in %d steps (%d closed)",
        goal,
        source,
        len(path) - 1,
        len(closed),
    )
    return SearchResult(path=path, success=True, goal=goal, expanded=len(closed))


def _reconstruct_path(
    grid: HeightGrid,
    closed: Dict[Position, SearchNode],
    goal: Position,
) -> List[PathStep]:
    """Follow parent links from goal back to the source, then reverse."""
    path: List[PathStep] = []
    current: Optional[Position] = goal
    while current is not None:
        path.append((current, grid.elevation_at(current)))
        current = closed[current].parent
    path.reverse()
    return path
