# src/cli/hike.py
"""
Command-line driver for the height-map queries.

    heightmap-hike inputs/day12.in
    heightmap-hike inputs/day12.in --verify --show-path
    heightmap-hike inputs/day12.in --json

Parses the map, runs climb_to_end and shortest_hike, and prints a rich
table with steps and timings (or JSON with --json).
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from heightmap.adjacency import Direction, neighbors_for
from heightmap.config import load_config
from heightmap.graph import bfs_steps
from heightmap.grid import HeightGrid, HeightMapError
from heightmap.logging_config import configure_logging
from heightmap.parse import load_heightmap
from heightmap.queries import LOWEST_ELEVATION, QueryReport, run_queries, timed_load
from heightmap.search import SearchResult
from heightmap.tracing import SearchTracer

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fewest-steps queries over a letter-elevation height map."
    )
    parser.add_argument("input", help="Path to the height map text file")
    parser.add_argument("--config", default=None, help="YAML config file (default: config/heightmap.yaml)")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check both answers with a networkx BFS",
    )
    parser.add_argument("--show-path", action="store_true", help="Print the cells of each path")
    parser.add_argument("--json", action="store_true", help="Emit a JSON summary instead of a table")
    return parser


def verify_report(grid: HeightGrid, report: QueryReport) -> List[str]:
    """Return a list of mismatches between the engine and networkx BFS."""
    expected_climb = bfs_steps(
        grid,
        neighbors_for(Direction.FORWARD),
        grid.start,
        lambda pos: pos == grid.end,
    )
    expected_hike = bfs_steps(
        grid,
        neighbors_for(Direction.REVERSE),
        grid.end,
        lambda pos: grid.elevation_at(pos) == LOWEST_ELEVATION,
    )

    problems: List[str] = []
    if report.climb.steps != expected_climb:
        problems.append(f"climb_to_end: engine={report.climb.steps} bfs={expected_climb}")
    if report.hike.steps != expected_hike:
        problems.append(f"shortest_hike: engine={report.hike.steps} bfs={expected_hike}")
    return problems


def render_report(report: QueryReport) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Query", style="bold", width=16)
    table.add_column("Steps", justify="right")
    table.add_column("Goal")
    table.add_column("Expanded", justify="right")
    table.add_column("Took", justify="right")

    if report.parse_duration_s is not None:
        table.add_row("parse", "-", "-", "-", f"{report.parse_duration_s * 1000:.6f}ms")

    for name, result, trace in (
        ("climb_to_end", report.climb, report.climb_trace),
        ("shortest_hike", report.hike, report.hike_trace),
    ):
        steps = str(result.steps) if result.success else "[red]unreachable[/red]"
        goal = str(result.goal) if result.goal is not None else "-"
        took = f"{trace.duration_s * 1000:.6f}ms" if trace is not None else "-"
        table.add_row(name, steps, goal, str(result.expanded), took)

    return table


def render_path(name: str, result: SearchResult) -> Panel:
    txt = Text()
    if not result.success:
        txt.append("<no path>")
    else:
        for i, (pos, elevation) in enumerate(result.path):
            txt.append(f"{i:>4} ", style="dim")
            txt.append(f"{pos} ")
            txt.append(f"{chr(ord('a') + elevation)}\n", style="green")
    return Panel(txt, title=name, border_style="cyan")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
        if args.log_level:
            cfg.log_level = args.log_level.upper()
            cfg.validate()
    except (FileNotFoundError, ValueError) as exc:
        configure_logging()
        log.error("Failed to load config: %s", exc)
        return EXIT_INPUT_ERROR

    configure_logging(cfg.log_level)

    try:
        grid, parse_duration = timed_load(
            load_heightmap,
            args.input,
            start_marker=cfg.start_marker,
            end_marker=cfg.end_marker,
        )
    except (FileNotFoundError, HeightMapError) as exc:
        log.error("Failed to load height map %s: %s", args.input, exc)
        return EXIT_INPUT_ERROR

    tracer = SearchTracer(max_records=cfg.trace_max_records)
    report = run_queries(grid, tracer=tracer, parse_duration_s=parse_duration)

    problems: List[str] = []
    if args.verify or cfg.verify:
        problems = verify_report(grid, report)
        for problem in problems:
            log.error("Verification mismatch: %s", problem)

    if args.json:
        data = report.as_dict()
        if args.verify or cfg.verify:
            data["verified"] = not problems
        print(json.dumps(data, indent=2, sort_keys=True))
    else:
        console = Console()
        console.print(render_report(report))
        if args.show_path:
            console.print(render_path("climb_to_end", report.climb))
            console.print(render_path("shortest_hike", report.hike))

    return EXIT_MISMATCH if problems else EXIT_OK


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
