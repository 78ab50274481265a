# tests/test_heightmap_grid.py
"""
Unit tests for HeightGrid construction and lookups.
"""

from __future__ import annotations

import dataclasses

import pytest

from heightmap.grid import (
    HeightGrid,
    HeightMapError,
    InvalidShapeError,
    OutOfBoundsError,
)


def make_grid() -> HeightGrid:
    return HeightGrid.from_rows(
        [
            [0, 1, 2],
            [3, 4, 5],
        ],
        start=(0, 0),
        end=(1, 2),
    )


def test_dimensions_and_markers() -> None:
    grid = make_grid()

    assert grid.height == 2
    assert grid.width == 3
    assert grid.shape == (2, 3)
    assert grid.start == (0, 0)
    assert grid.end == (1, 2)


def test_elevation_lookup() -> None:
    grid = make_grid()

    assert grid.elevation_at((0, 0)) == 0
    assert grid.elevation_at((1, 1)) == 4
    assert grid.elevation_at((1, 2)) == 5


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_out_of_bounds_lookup_fails_fast(pos) -> None:
    grid = make_grid()

    with pytest.raises(OutOfBoundsError) as excinfo:
        grid.elevation_at(pos)

    assert excinfo.value.code == "out_of_bounds"
    assert excinfo.value.details["position"] == pos
    # Still an IndexError for callers that only know the builtin.
    assert isinstance(excinfo.value, IndexError)


def test_empty_grid_rejected() -> None:
    with pytest.raises(InvalidShapeError) as excinfo:
        HeightGrid.from_rows([], start=(0, 0), end=(0, 0))
    assert excinfo.value.code == "invalid_shape"


def test_empty_row_rejected() -> None:
    with pytest.raises(InvalidShapeError):
        HeightGrid.from_rows([[]], start=(0, 0), end=(0, 0))


def test_ragged_rows_rejected() -> None:
    with pytest.raises(InvalidShapeError) as excinfo:
        HeightGrid.from_rows([[0, 1, 2], [3, 4]], start=(0, 0), end=(0, 2))

    details = excinfo.value.details
    assert details["row"] == 1
    assert details["expected_width"] == 3
    assert details["actual_width"] == 2


def test_markers_must_be_in_bounds() -> None:
    with pytest.raises(OutOfBoundsError) as excinfo:
        HeightGrid.from_rows([[0, 1]], start=(0, 0), end=(1, 1))
    assert excinfo.value.details["marker"] == "end"


def test_error_str_carries_code() -> None:
    err = InvalidShapeError({"reason": "empty grid"})

    assert isinstance(err, HeightMapError)
    assert "invalid_shape" in str(err)


def test_grid_is_immutable() -> None:
    grid = make_grid()

    with pytest.raises(dataclasses.FrozenInstanceError):
        grid.start = (1, 1)  # type: ignore[misc]

    # Rows are stored as tuples even if lists were passed in.
    assert isinstance(grid.rows, tuple)
    assert all(isinstance(row, tuple) for row in grid.rows)


def test_neighbors_4dir_respects_edges() -> None:
    grid = make_grid()

    assert grid.neighbors_4dir((0, 0)) == [(1, 0), (0, 1)]
    assert grid.neighbors_4dir((1, 2)) == [(0, 2), (1, 1)]
    assert grid.neighbors_4dir((0, 1)) == [(1, 1), (0, 0), (0, 2)]


def test_single_cell_grid_has_no_neighbors() -> None:
    grid = HeightGrid.from_rows([[7]], start=(0, 0), end=(0, 0))

    assert grid.neighbors_4dir((0, 0)) == []
    assert grid.positions() == [(0, 0)]
