from __future__ import annotations

from datetime import date
from typing import List

from ..i18n import Translation, short_day_name
from ..models import PlannerConfig
from .backend import DrawingBackend
from .geometry import TITLE_Y, PageGeometry, day_header_y
from .slots import TimeSlot, generate_slots
from .weeks import sunday_weekday, week_days, week_label


# Planning / reflection pages
NOTES_MARGIN = 15.0
NOTES_TITLE_Y = 20.0
NOTES_WEEK_Y = 30.0
NOTES_SEPARATOR_Y = 35.0
NOTES_FIRST_RULE_Y = 45.0
NOTES_BOTTOM_RESERVE = 60.0
NOTES_RULE_SPACING = 8.0
NOTES_DOT_PITCH = 3.0
NOTES_CLOSING_RULE_OFFSET = 20.0

# Weekly grid page
DAY_LABEL_INSET = 2.0
LABEL_BASELINE_OFFSET = 3.0
MINOR_LABEL_X = 11.0
NOTES_LABEL_INSET = 2.0
NOTES_ROWS_OFFSET = 6.0
NOTES_ROWS_BOTTOM = 10.0
NOTES_ROW_SPACING = 6.0
NOTES_ROW_DOT_PITCH = 2.5


def _s(style: dict, key: str, default):
    return style.get(key, default)


def _dotted_rule(
    backend: DrawingBackend,
    x_start: float,
    x_end: float,
    y: float,
    pitch: float,
    radius: float,
) -> None:
    x = x_start
    step = 0
    while x < x_end:
        backend.draw_filled_circle(x, y, radius)
        step += 1
        x = x_start + step * pitch


def compose_notes_page(
    backend: DrawingBackend,
    cfg: PlannerConfig,
    title: str,
    week_start: date,
    t: Translation,
    style: dict,
) -> None:
    width, height = cfg.paper_dimensions
    margin = NOTES_MARGIN

    backend.set_text_color(str(_s(style, "heading_color", "#000000")))
    backend.set_font_size(float(_s(style, "notes_title_size", 14)))
    backend.set_font_weight("bold")
    backend.draw_text(title, margin, NOTES_TITLE_Y)

    backend.set_font_size(float(_s(style, "notes_subtitle_size", 10)))
    backend.set_font_weight("normal")
    backend.draw_text(week_label(week_start, t), margin, NOTES_WEEK_Y)

    backend.set_stroke_color(str(_s(style, "rule_color", "#C8C8C8")))
    backend.set_stroke_width(float(_s(style, "rule_width", 0.2)))
    backend.draw_line(margin, NOTES_SEPARATOR_Y, width - margin, NOTES_SEPARATOR_Y)

    backend.set_stroke_color(str(_s(style, "dot_color", "#D2D2D2")))
    radius = float(_s(style, "dot_radius", 0.2))
    bottom = height - NOTES_BOTTOM_RESERVE
    row = 0
    y = NOTES_FIRST_RULE_Y
    while y < bottom:
        _dotted_rule(backend, margin, width - margin, y, NOTES_DOT_PITCH, radius)
        row += 1
        y = NOTES_FIRST_RULE_Y + row * NOTES_RULE_SPACING

    backend.set_stroke_color(str(_s(style, "footer_rule_color", "#969696")))
    closing_y = height - NOTES_CLOSING_RULE_OFFSET
    backend.draw_line(margin, closing_y, width - margin, closing_y)


def compose_planning_page(
    backend: DrawingBackend, cfg: PlannerConfig, week_start: date, t: Translation, style: dict
) -> None:
    compose_notes_page(backend, cfg, t.planning, week_start, t, style)


def compose_reflection_page(
    backend: DrawingBackend, cfg: PlannerConfig, week_start: date, t: Translation, style: dict
) -> None:
    compose_notes_page(backend, cfg, t.reflections, week_start, t, style)


def _draw_time_label(backend: DrawingBackend, slot: TimeSlot, margin: float, y: float, style: dict) -> None:
    baseline = y + LABEL_BASELINE_OFFSET
    if slot.is_major:
        backend.set_text_color(str(_s(style, "text_color", "#282828")))
        backend.set_font_size(float(_s(style, "major_label_size", 8)))
        backend.set_font_weight("bold")
        backend.draw_text(slot.label, margin + DAY_LABEL_INSET, baseline)
        return
    backend.set_text_color(str(_s(style, "muted_text_color", "#787878")))
    backend.set_font_size(float(_s(style, "minor_label_size", 7)))
    backend.set_font_weight("normal")
    backend.draw_text(slot.short_label, margin + MINOR_LABEL_X, baseline)


def _draw_row_rules(
    backend: DrawingBackend,
    geo: PageGeometry,
    y: float,
    is_major: bool,
    show_grid: bool,
    style: dict,
) -> None:
    if show_grid:
        color_key = "grid_major_color" if is_major else "grid_minor_color"
        default_color = "#C8C8C8" if is_major else "#E6E6E6"
    else:
        color_key = "plain_major_color" if is_major else "plain_minor_color"
        default_color = "#DCDCDC" if is_major else "#F0F0F0"
    width = float(_s(style, "major_width", 0.2)) if is_major else float(_s(style, "minor_width", 0.1))
    backend.set_stroke_color(str(_s(style, color_key, default_color)))
    backend.set_stroke_width(width)

    bottom = y + geo.row_height
    for index in range(geo.day_count):
        x = geo.column_x(index)
        backend.draw_line(x, bottom, x + geo.day_column_width, bottom)
        if show_grid and index < geo.day_count - 1:
            right = x + geo.day_column_width
            backend.draw_line(right, y, right, bottom)


def compose_weekly_page(
    backend: DrawingBackend,
    cfg: PlannerConfig,
    week_start: date,
    geo: PageGeometry,
    t: Translation,
    style: dict,
) -> int:
    """Draw the weekly time grid. Returns the number of time rows drawn."""
    margin = geo.margin
    days = week_days(week_start, cfg.week_start_day, cfg.week_end_day)

    backend.set_text_color(str(_s(style, "heading_color", "#000000")))
    if cfg.show_header:
        backend.set_font_size(float(_s(style, "week_title_size", 12)))
        backend.set_font_weight("bold")
        backend.draw_text(week_label(week_start, t), margin, TITLE_Y)

    header_y = day_header_y(cfg.show_header)
    backend.set_font_size(float(_s(style, "day_header_size", 11)))
    backend.set_font_weight("bold")
    for index, day in enumerate(days):
        name = short_day_name(t, sunday_weekday(day))
        backend.draw_text(f"{name} {day.day}", geo.column_x(index) + DAY_LABEL_INSET, header_y)

    backend.set_stroke_color(str(_s(style, "rule_color", "#C8C8C8")))
    backend.set_stroke_width(float(_s(style, "rule_width", 0.2)))
    for index in range(len(days)):
        x = geo.column_x(index)
        backend.draw_line(x, geo.grid_top, x + geo.day_column_width, geo.grid_top)

    slots: List[TimeSlot] = generate_slots(cfg.start_hour, cfg.end_hour, cfg.time_intervals, cfg.hour_format)
    drawn = 0
    for index, slot in enumerate(slots):
        y = geo.row_y(index)
        if y > geo.grid_limit:
            # rows past the notes band are dropped, not squeezed
            break
        _draw_time_label(backend, slot, margin, y, style)
        _draw_row_rules(backend, geo, y, slot.is_major, cfg.show_grid, style)
        drawn += 1

    _compose_day_notes(backend, geo, style, t)
    return drawn


def _compose_day_notes(backend: DrawingBackend, geo: PageGeometry, style: dict, t: Translation) -> None:
    label_y = geo.notes_top
    backend.set_text_color(str(_s(style, "text_color", "#282828")))
    backend.set_font_size(float(_s(style, "notes_label_size", 10)))
    backend.set_font_weight("bold")
    for index in range(geo.day_count):
        backend.draw_text(t.notes, geo.column_x(index) + NOTES_LABEL_INSET, label_y)

    backend.set_stroke_color(str(_s(style, "notes_dot_color", "#C8C8C8")))
    radius = float(_s(style, "dot_radius", 0.2))
    top = label_y + NOTES_ROWS_OFFSET
    bottom = geo.paper_height - NOTES_ROWS_BOTTOM
    row = 0
    y = top
    while y < bottom:
        for index in range(geo.day_count):
            x = geo.column_x(index)
            _dotted_rule(
                backend,
                x + NOTES_LABEL_INSET,
                x + geo.day_column_width - NOTES_LABEL_INSET,
                y,
                NOTES_ROW_DOT_PITCH,
                radius,
            )
        row += 1
        y = top + row * NOTES_ROW_SPACING
