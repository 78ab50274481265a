# src/heightmap/parse.py
"""
Text -> HeightGrid.

Input format: one row per line, `a`..`z` for elevations 0..25, a start
marker (default `S`, elevation 0) and an end marker (default `E`,
elevation 25). Blank lines are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from .grid import HeightGrid, HeightMapError, InvalidShapeError, Position

START_ELEVATION = 0
END_ELEVATION = 25


class HeightMapParseError(HeightMapError, ValueError):
    """Raised for unknown characters or missing/duplicated markers."""

    def __init__(self, details: dict[str, Any]) -> None:
        super().__init__(code="parse_error", details=details)


def parse_heightmap(
    text: str,
    *,
    start_marker: str = "S",
    end_marker: str = "E",
) -> HeightGrid:
    """Parse a textual height map into a HeightGrid."""
    if start_marker == end_marker:
        raise ValueError("start_marker and end_marker must differ")

    rows: List[List[int]] = []
    start: Optional[Position] = None
    end: Optional[Position] = None

    for line_no, raw in enumerate(text.splitlines()):
        line = raw.strip()
        if not line:
            continue

        i = len(rows)
        indent = len(raw) - len(raw.lstrip())
        row: List[int] = []
        for j, ch in enumerate(line):
            if ch == start_marker:
                if start is not None:
                    raise HeightMapParseError(
                        {"reason": "duplicate start marker", "line": line_no, "column": indent + j}
                    )
                start = (i, j)
                row.append(START_ELEVATION)
            elif ch == end_marker:
                if end is not None:
                    raise HeightMapParseError(
                        {"reason": "duplicate end marker", "line": line_no, "column": indent + j}
                    )
                end = (i, j)
                row.append(END_ELEVATION)
            elif "a" <= ch <= "z":
                row.append(ord(ch) - ord("a"))
            else:
                raise HeightMapParseError(
                    {"reason": "unexpected character", "char": ch, "line": line_no, "column": indent + j}
                )
        rows.append(row)

    if not rows:
        raise InvalidShapeError({"reason": "empty grid"})
    if start is None:
        raise HeightMapParseError({"reason": "missing start marker", "marker": start_marker})
    if end is None:
        raise HeightMapParseError({"reason": "missing end marker", "marker": end_marker})

    return HeightGrid.from_rows(rows, start=start, end=end)


def load_heightmap(path: Path | str, **kwargs: Any) -> HeightGrid:
    """Read a UTF-8 height-map file and parse it."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing height map file: {path}")
    return parse_heightmap(path.read_text(encoding="utf-8"), **kwargs)
