# tests/test_heightmap_parse.py

from __future__ import annotations

from pathlib import Path

import pytest

from heightmap.grid import InvalidShapeError
from heightmap.parse import HeightMapParseError, load_heightmap, parse_heightmap


def test_parse_sample_markers_and_elevations(sample_grid) -> None:
    assert sample_grid.shape == (5, 8)
    assert sample_grid.start == (0, 0)
    assert sample_grid.end == (2, 5)

    # Markers carry the lowest / highest elevation.
    assert sample_grid.elevation_at((0, 0)) == 0
    assert sample_grid.elevation_at((2, 5)) == 25

    # Plain letters map a..z -> 0..25.
    assert sample_grid.elevation_at((0, 1)) == 0   # a
    assert sample_grid.elevation_at((0, 2)) == 1   # b
    assert sample_grid.elevation_at((2, 4)) == 25  # z
    assert sample_grid.elevation_at((1, 3)) == 17  # r


def test_blank_lines_and_trailing_whitespace_are_ignored() -> None:
    grid = parse_heightmap("\nSab  \n\nbcE\n\n")

    assert grid.shape == (2, 3)
    assert grid.start == (0, 0)
    assert grid.end == (1, 2)


def test_custom_markers() -> None:
    grid = parse_heightmap("@ab\nbc#", start_marker="@", end_marker="#")

    assert grid.start == (0, 0)
    assert grid.end == (1, 2)
    assert grid.elevation_at(grid.end) == 25


@pytest.mark.parametrize(
    "text, reason",
    [
        ("abc\nbcE", "missing start marker"),
        ("Sbc\nbca", "missing end marker"),
        ("SbS\nbcE", "duplicate start marker"),
        ("SbE\nbcE", "duplicate end marker"),
        ("Sb1\nbcE", "unexpected character"),
        ("SbA\nbcE", "unexpected character"),
    ],
)
def test_parse_errors(text: str, reason: str) -> None:
    with pytest.raises(HeightMapParseError) as excinfo:
        parse_heightmap(text)

    assert excinfo.value.code == "parse_error"
    assert excinfo.value.details["reason"] == reason
    assert isinstance(excinfo.value, ValueError)


def test_unexpected_character_reports_location() -> None:
    with pytest.raises(HeightMapParseError) as excinfo:
        parse_heightmap("Sbc\nb?E")

    assert excinfo.value.details["line"] == 1
    assert excinfo.value.details["column"] == 1
    assert excinfo.value.details["char"] == "?"


def test_error_location_counts_blank_lines() -> None:
    with pytest.raises(HeightMapParseError) as excinfo:
        parse_heightmap("\nSbc\n\nb?E\n")

    assert excinfo.value.details["line"] == 3
    assert excinfo.value.details["column"] == 1


def test_error_location_counts_leading_whitespace() -> None:
    with pytest.raises(HeightMapParseError) as excinfo:
        parse_heightmap("  Sbc\n  b?E\n")

    assert excinfo.value.details["line"] == 1
    assert excinfo.value.details["column"] == 3


def test_duplicate_marker_location_counts_blank_lines() -> None:
    with pytest.raises(HeightMapParseError) as excinfo:
        parse_heightmap("SbE\n\n\nbcS\n")

    assert excinfo.value.details["reason"] == "duplicate start marker"
    assert excinfo.value.details["line"] == 3
    assert excinfo.value.details["column"] == 2


def test_empty_text_is_invalid_shape() -> None:
    with pytest.raises(InvalidShapeError):
        parse_heightmap("   \n\n")


def test_ragged_text_is_invalid_shape() -> None:
    with pytest.raises(InvalidShapeError):
        parse_heightmap("Sabc\nbE")


def test_same_marker_for_both_rejected() -> None:
    with pytest.raises(ValueError):
        parse_heightmap("Sa", start_marker="S", end_marker="S")


def test_load_heightmap_from_file(sample_file: Path) -> None:
    grid = load_heightmap(sample_file)

    assert grid.end == (2, 5)


def test_load_heightmap_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_heightmap(tmp_path / "nope.in")
