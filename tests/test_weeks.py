from __future__ import annotations

from datetime import date

from weekly_planner.i18n import get_translation
from weekly_planner.pipeline.weeks import (
    align_week_start,
    day_count,
    enumerate_weeks,
    week_days,
    week_label,
    week_number,
)


def test_january_2025_monday_start() -> None:
    weeks = enumerate_weeks(2025, 1, 1, 1)
    assert weeks == [
        date(2024, 12, 30),
        date(2025, 1, 6),
        date(2025, 1, 13),
        date(2025, 1, 20),
        date(2025, 1, 27),
    ]


def test_sunday_start_aligns_into_previous_year() -> None:
    weeks = enumerate_weeks(2025, 1, 1, 0)
    assert weeks[0] == date(2024, 12, 29)
    assert weeks[-1] == date(2025, 1, 26)
    assert len(weeks) == 5


def test_full_year_weeks_are_seven_days_apart() -> None:
    weeks = enumerate_weeks(2025, 1, 12, 1)
    assert len(weeks) == 53
    assert weeks[-1] == date(2025, 12, 29)
    assert all((b - a).days == 7 for a, b in zip(weeks, weeks[1:]))
    assert all(week.weekday() == 0 for week in weeks)


def test_week_count_tracks_days_in_range() -> None:
    for start_day in range(7):
        weeks = enumerate_weeks(2024, 2, 4, start_day)
        days_in_range = (date(2024, 4, 30) - date(2024, 2, 1)).days + 1
        expected = -(-days_in_range // 7)
        assert expected - 1 <= len(weeks) <= expected + 1


def test_inverted_month_range_is_empty() -> None:
    assert enumerate_weeks(2025, 3, 2, 1) == []


def test_align_week_start_keeps_matching_day() -> None:
    assert align_week_start(date(2025, 1, 1), 3) == date(2025, 1, 1)
    assert align_week_start(date(2025, 1, 1), 4) == date(2024, 12, 26)


def test_day_count_plain_and_wrapping() -> None:
    assert day_count(1, 5) == 5
    assert day_count(5, 1) == 4
    assert day_count(0, 6) == 7
    assert day_count(3, 3) == 1
    assert day_count(6, 5) == 7


def test_week_days_wrap_across_weekend() -> None:
    days = week_days(date(2025, 1, 3), 5, 1)
    assert days == [date(2025, 1, 3), date(2025, 1, 4), date(2025, 1, 5), date(2025, 1, 6)]


def test_week_number_sunday_based() -> None:
    assert week_number(date(2024, 12, 30)) == 1
    assert week_number(date(2025, 1, 6)) == 2
    assert week_number(date(2025, 12, 27)) == 52
    assert week_number(date(2025, 12, 28)) == 1


def test_week_label_is_translated() -> None:
    assert week_label(date(2025, 1, 6), get_translation("de")) == "Woche 2 • Januar 2025"
    assert week_label(date(2025, 3, 3), get_translation("fr")) == "Semaine 10 • Mars 2025"
