from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import List

from ..i18n import Translation, month_name


WEEK = timedelta(days=7)


def sunday_weekday(day: date) -> int:
    """Weekday of ``day`` as 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def align_week_start(day: date, week_start_day: int) -> date:
    """Move ``day`` back to the most recent date falling on ``week_start_day``."""
    offset = (sunday_weekday(day) - week_start_day) % 7
    return day - timedelta(days=offset)


def enumerate_weeks(year: int, start_month: int, end_month: int, week_start_day: int) -> List[date]:
    """
    Week-start dates covering ``start_month``..``end_month`` of ``year``, both inclusive.

    The first week may begin in the previous month (or year). An inverted month
    range yields no weeks.
    """
    if end_month < start_month:
        return []
    range_start = date(year, start_month, 1)
    range_end = date(year, end_month, calendar.monthrange(year, end_month)[1])

    weeks: List[date] = []
    current = align_week_start(range_start, week_start_day)
    while current <= range_end:
        weeks.append(current)
        current = current + WEEK
    return weeks


def day_count(week_start_day: int, week_end_day: int) -> int:
    if week_end_day >= week_start_day:
        return week_end_day - week_start_day + 1
    return 7 - week_start_day + week_end_day + 1


def week_days(week_start: date, week_start_day: int, week_end_day: int) -> List[date]:
    base = align_week_start(week_start, week_start_day)
    return [base + timedelta(days=i) for i in range(day_count(week_start_day, week_end_day))]


def week_number(day: date) -> int:
    """
    Week of year with Sunday-start weeks where week 1 is the week holding January 1.

    Late-December dates already inside next year's week 1 report 1.
    """
    start = align_week_start(day, 0)
    next_first = align_week_start(date(day.year + 1, 1, 1), 0)
    if start >= next_first:
        return 1
    first = align_week_start(date(day.year, 1, 1), 0)
    return (start - first).days // 7 + 1


def week_label(week_start: date, translation: Translation) -> str:
    month_year = f"{month_name(translation, week_start.month)} {week_start.year}"
    return f"{translation.week} {week_number(week_start)} • {month_year}"
