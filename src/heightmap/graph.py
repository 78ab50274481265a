# src/heightmap/graph.py
"""
networkx view of a HeightGrid under a given neighbour rule.

Used as an independent cross-check of the uniform-cost engine: plain BFS
over the same directed reachability graph must report the same minimum
step count.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from .adjacency import NeighborFn
from .grid import HeightGrid, Position
from .search import GoalFn


def reachability_graph(grid: HeightGrid, neighbors: NeighborFn) -> nx.DiGraph:
    """Directed graph with one node per cell and an edge per allowed step."""
    graph = nx.DiGraph()
    for pos in grid.positions():
        graph.add_node(pos, elevation=grid.elevation_at(pos))
    for pos in grid.positions():
        for nxt in neighbors(grid, pos):
            graph.add_edge(pos, nxt)
    return graph


def bfs_steps(
    grid: HeightGrid,
    neighbors: NeighborFn,
    source: Position,
    is_goal: GoalFn,
) -> Optional[int]:
    """Minimum edges from source to any goal cell, or None if unreachable."""
    graph = reachability_graph(grid, neighbors)
    lengths = nx.single_source_shortest_path_length(graph, source)
    candidates = [dist for pos, dist in lengths.items() if is_goal(pos)]
    if not candidates:
        return None
    return min(candidates)
