# elevation grid abstraction for height-map navigation
# src/heightmap/grid.py
"""
HeightGrid: immutable elevation grid with designated start/end cells.

This module does not know any search rules. It only:
- Validates and owns the elevation data.
- Exposes bounds-checked elevation lookups.
- Exposes the in-bounds 4-directional neighbours of a cell.

Which neighbours are actually reachable is decided in heightmap.adjacency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

# (row, column) integer coordinates
Position = Tuple[int, int]


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class HeightMapError(RuntimeError):
    """
    Domain-level error raised by grid construction, lookups and parsing.

    Unreachable goals are NOT errors; the search engine reports them as a
    SearchResult with success=False.
    """

    code: str
    details: dict[str, Any]

    def __str__(self) -> str:
        return f"HeightMapError(code={self.code!r}, details={self.details!r})"


class InvalidShapeError(HeightMapError):
    """Grid input is empty or its rows have unequal widths."""

    def __init__(self, details: dict[str, Any]) -> None:
        super().__init__(code="invalid_shape", details=details)


class OutOfBoundsError(HeightMapError, IndexError):
    """A position outside [0, height) x [0, width) was looked up."""

    def __init__(self, details: dict[str, Any]) -> None:
        super().__init__(code="out_of_bounds", details=details)


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HeightGrid:
    """
    Rectangular elevation grid.

    Responsibilities:
    - Hold elevations (conventionally 0..25) as immutable rows.
    - Carry the start and end positions resolved by the caller.

    It does NOT:
    - Parse text (see heightmap.parse).
    - Decide reachability between cells.
    """

    rows: Tuple[Tuple[int, ...], ...]
    start: Position
    end: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

        if not self.rows:
            raise InvalidShapeError({"reason": "empty grid"})

        width = len(self.rows[0])
        if width == 0:
            raise InvalidShapeError({"reason": "empty row", "row": 0})

        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise InvalidShapeError(
                    {
                        "reason": "ragged rows",
                        "row": index,
                        "expected_width": width,
                        "actual_width": len(row),
                    }
                )

        for name in ("start", "end"):
            pos = getattr(self, name)
            if not self.in_bounds(pos):
                raise OutOfBoundsError(
                    {"position": pos, "marker": name, "shape": self.shape}
                )

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[int]],
        start: Position,
        end: Position,
    ) -> "HeightGrid":
        """Build a grid from any iterable of int sequences (copied into tuples)."""
        frozen_rows = tuple(tuple(int(h) for h in row) for row in rows)
        return cls(
            rows=frozen_rows,
            start=(int(start[0]), int(start[1])),
            end=(int(end[0]), int(end[1])),
        )

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width

    def elevation_at(self, pos: Position) -> int:
        """
        Return the elevation at pos.

        Negative indices are rejected rather than wrapped; callers are
        expected to bounds-check first, so hitting this error means a bug.
        """
        if not self.in_bounds(pos):
            raise OutOfBoundsError({"position": pos, "shape": self.shape})
        row, col = pos
        return self.rows[row][col]

    def neighbors_4dir(self, pos: Position) -> List[Position]:
        """
        Return the in-bounds north, south, west and east neighbours of pos.

        No elevation rule is applied here.
        """
        row, col = pos
        candidates: List[Position] = []

        if row > 0:
            candidates.append((row - 1, col))
        if row < self.height - 1:
            candidates.append((row + 1, col))
        if col > 0:
            candidates.append((row, col - 1))
        if col < self.width - 1:
            candidates.append((row, col + 1))

        return candidates

    def positions(self) -> List[Position]:
        """All cell positions in row-major order."""
        return [(r, c) for r in range(self.height) for c in range(self.width)]
