from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..config import load_style_preset
from ..i18n import Translation, get_translation
from ..models import PlannerConfig
from .backend import DrawingBackend, ReportLabBackend
from .compose import compose_planning_page, compose_reflection_page, compose_weekly_page
from .geometry import weekly_geometry
from .weeks import enumerate_weeks


logger = logging.getLogger(__name__)

PAGES_PER_WEEK = 3


@dataclass(frozen=True)
class RenderSummary:
    week_count: int
    page_count: int
    rows_per_week: List[int]


def render_document(cfg: PlannerConfig, backend: DrawingBackend, style: dict | None = None) -> RenderSummary:
    """
    Draw every page triad (planning, weekly grid, reflection) onto ``backend``.

    Pages are separated with ``start_new_page``; nothing follows the last page.
    Exporting is left to the caller.
    """
    style = load_style_preset() if style is None else style
    t: Translation = get_translation(cfg.language)
    weeks = enumerate_weeks(cfg.year, cfg.start_month, cfg.end_month, cfg.week_start_day)

    rows_per_week: List[int] = []
    page_count = 0
    for week_start in weeks:
        if page_count > 0:
            backend.start_new_page()
        compose_planning_page(backend, cfg, week_start, t, style)
        backend.start_new_page()
        rows = compose_weekly_page(backend, cfg, week_start, weekly_geometry(cfg), t, style)
        rows_per_week.append(rows)
        backend.start_new_page()
        compose_reflection_page(backend, cfg, week_start, t, style)
        page_count += PAGES_PER_WEEK

    return RenderSummary(week_count=len(weeks), page_count=page_count, rows_per_week=rows_per_week)


def render_pdf(cfg: PlannerConfig, output_path: Path) -> RenderSummary:
    style = load_style_preset()
    backend = ReportLabBackend(cfg.paper_dimensions, style)
    summary = render_document(cfg, backend, style)
    logger.info(
        "Rendered %s weeks (%s pages) to %s", summary.week_count, summary.page_count, output_path.name
    )
    backend.export(output_path)
    return summary


def estimate_page_count(cfg: PlannerConfig) -> int:
    # rough figure shown before generating; the real count comes from the weeks
    months = cfg.end_month - cfg.start_month + 1
    return max(0, math.ceil(months * 4.3))


def exact_page_count(cfg: PlannerConfig) -> int:
    weeks = enumerate_weeks(cfg.year, cfg.start_month, cfg.end_month, cfg.week_start_day)
    return PAGES_PER_WEEK * len(weeks)
