from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..models import PlannerConfig
from .slots import slot_count
from .weeks import day_count


# All values in millimetres.
WEEK_MARGIN = 10.0
TIME_COLUMN_WIDTH = 12.0
TITLE_Y = 14.0
DAY_HEADER_Y = 24.0
DAY_HEADER_Y_NO_TITLE = 12.0
DAY_HEADER_GAP = 10.0
NOTES_BAND_HEIGHT = 50.0
NOTES_BAND_GAP = 10.0
MIN_ROW_HEIGHT = 3.5
MIN_AVAILABLE_HEIGHT = 60.0


@dataclass(frozen=True)
class PageGeometry:
    paper_width: float
    paper_height: float
    margin: float
    time_column_width: float
    day_count: int
    slot_count: int
    day_column_width: float
    grid_top: float
    grid_limit: float
    available_height: float
    row_height: float

    def column_x(self, index: int) -> float:
        return self.margin + self.time_column_width + index * self.day_column_width

    def row_y(self, index: int) -> float:
        # index * height, never a running sum, so row edges are reproducible
        return self.grid_top + index * self.row_height

    @property
    def grid_height(self) -> float:
        return self.slot_count * self.row_height

    @property
    def overflows(self) -> bool:
        return self.grid_height > self.available_height

    @property
    def visible_rows(self) -> int:
        rows = 0
        while rows < self.slot_count and self.row_y(rows) <= self.grid_limit:
            rows += 1
        return rows

    @property
    def notes_top(self) -> float:
        return self.paper_height - NOTES_BAND_HEIGHT


def compute_geometry(
    paper: Tuple[float, float],
    margin: float,
    day_count: int,
    slot_count: int,
    header_reserved_height: float,
    footer_reserved_height: float,
    time_column_width: float = TIME_COLUMN_WIDTH,
) -> PageGeometry:
    """
    Column widths and row height for one weekly grid page.

    Rows stretch to fill the band between the header and the footer reservation
    and shrink down to ``MIN_ROW_HEIGHT``. Past that floor the grid is allowed to
    run beyond ``grid_limit``; the composer drops the rows that would.
    """
    width, height = paper
    grid_limit = height - footer_reserved_height
    available = max(MIN_AVAILABLE_HEIGHT, grid_limit - header_reserved_height)
    usable_width = width - 2 * margin - time_column_width
    day_width = usable_width / day_count if day_count > 0 else 0.0
    if slot_count > 0:
        row_height = max(MIN_ROW_HEIGHT, available / slot_count)
    else:
        row_height = available
    return PageGeometry(
        paper_width=width,
        paper_height=height,
        margin=margin,
        time_column_width=time_column_width,
        day_count=day_count,
        slot_count=slot_count,
        day_column_width=day_width,
        grid_top=header_reserved_height,
        grid_limit=grid_limit,
        available_height=available,
        row_height=row_height,
    )


def day_header_y(show_header: bool) -> float:
    return DAY_HEADER_Y if show_header else DAY_HEADER_Y_NO_TITLE


def weekly_geometry(cfg: PlannerConfig) -> PageGeometry:
    return compute_geometry(
        cfg.paper_dimensions,
        WEEK_MARGIN,
        day_count(cfg.week_start_day, cfg.week_end_day),
        slot_count(cfg.start_hour, cfg.end_hour, cfg.time_intervals),
        header_reserved_height=day_header_y(cfg.show_header) + DAY_HEADER_GAP,
        footer_reserved_height=NOTES_BAND_HEIGHT + NOTES_BAND_GAP,
    )
