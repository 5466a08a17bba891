from __future__ import annotations

from typing import List

from ..config import ALLOWED_HOUR_FORMATS, ALLOWED_INTERVALS, ALLOWED_LANGUAGES, PAPER_SIZES
from ..models import PlannerConfig


def _out_of_range(name: str, value: int, low: int, high: int) -> str | None:
    if not (low <= value <= high):
        return f"{name} must be between {low} and {high} (got {value})"
    return None


def validate_config(cfg: PlannerConfig) -> List[str]:
    """Human-readable problems with ``cfg``; an empty list means it can be rendered."""
    errors: List[str] = []
    checks = [
        _out_of_range("year", cfg.year, 2, 9998),
        _out_of_range("start_month", cfg.start_month, 1, 12),
        _out_of_range("end_month", cfg.end_month, 1, 12),
        _out_of_range("week_start_day", cfg.week_start_day, 0, 6),
        _out_of_range("week_end_day", cfg.week_end_day, 0, 6),
        _out_of_range("start_hour", cfg.start_hour, 0, 23),
        _out_of_range("end_hour", cfg.end_hour, 0, 23),
    ]
    errors.extend(message for message in checks if message)

    if cfg.paper_size not in PAPER_SIZES:
        errors.append(f"Unsupported paper size: {cfg.paper_size}")
    if cfg.language not in ALLOWED_LANGUAGES:
        errors.append(f"Unsupported language: {cfg.language}")
    if cfg.hour_format not in ALLOWED_HOUR_FORMATS:
        errors.append(f"Unsupported hour format: {cfg.hour_format}")
    if cfg.time_intervals not in ALLOWED_INTERVALS:
        allowed = ", ".join(str(value) for value in sorted(ALLOWED_INTERVALS))
        errors.append(f"Time interval must be one of {allowed} minutes (got {cfg.time_intervals})")

    # months do not wrap into the next year
    if cfg.end_month < cfg.start_month:
        errors.append("end_month must not be before start_month")
    if cfg.end_hour < cfg.start_hour:
        errors.append("end_hour must not be before start_hour")
    return errors
