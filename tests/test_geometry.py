from __future__ import annotations

import pytest

from weekly_planner.pipeline.geometry import (
    MIN_AVAILABLE_HEIGHT,
    MIN_ROW_HEIGHT,
    compute_geometry,
    weekly_geometry,
)


def test_a4_five_day_columns() -> None:
    geo = compute_geometry((210, 297), 10, 5, 54, 34, 60)
    assert geo.time_column_width == 12
    assert geo.day_column_width == pytest.approx(35.6)
    assert geo.column_x(0) == pytest.approx(22.0)
    assert geo.column_x(1) == pytest.approx(57.6)
    assert geo.grid_limit == 237
    assert geo.available_height == 203
    assert geo.row_height == pytest.approx(203 / 54)
    assert not geo.overflows
    assert geo.visible_rows == 54


def test_weekly_geometry_reserves_header_and_notes(make_config) -> None:
    geo = weekly_geometry(make_config())
    assert geo.grid_top == 34
    assert geo.grid_limit == 237
    assert geo.day_count == 5
    assert geo.slot_count == 54

    no_header = weekly_geometry(make_config(show_header=False))
    assert no_header.grid_top == 22
    assert no_header.available_height == 215
    assert no_header.row_height > geo.row_height


def test_row_height_floor_allows_overflow() -> None:
    geo = compute_geometry((210, 297), 10, 5, 144, 34, 60)
    assert geo.row_height == MIN_ROW_HEIGHT
    assert geo.grid_height > geo.available_height
    assert geo.overflows
    # rows are kept while their top edge is on or above the limit
    assert geo.visible_rows == 59


def test_rows_are_placed_by_index() -> None:
    geo = compute_geometry((297, 420), 10, 7, 90, 34, 60)
    for index in (0, 1, 45, 89):
        assert geo.row_y(index) == 34 + index * geo.row_height


def test_available_band_has_lower_bound() -> None:
    geo = compute_geometry((100, 100), 10, 1, 10, 34, 60)
    assert geo.available_height == MIN_AVAILABLE_HEIGHT
    assert geo.row_height == pytest.approx(6.0)


def test_no_slots() -> None:
    geo = compute_geometry((210, 297), 10, 5, 0, 34, 60)
    assert geo.visible_rows == 0
    assert geo.grid_height == 0
