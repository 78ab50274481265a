# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import heightmap`, `import cli`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# The classic 5x8 sample map: 31 steps to climb, 29 for the shortest hike.
SAMPLE_MAP = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_MAP


@pytest.fixture
def sample_grid():
    from heightmap.parse import parse_heightmap

    return parse_heightmap(SAMPLE_MAP)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "day12.in"
    path.write_text(SAMPLE_MAP, encoding="utf-8")
    return path
