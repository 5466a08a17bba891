from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class TimeSlot:
    hour: int
    minute: int
    label: str
    short_label: str

    @property
    def is_major(self) -> bool:
        return self.minute == 0


def _display_hour(hour: int, hour_format: str) -> str:
    if hour_format == "12":
        if hour == 0:
            return "12"
        if hour > 12:
            return str(hour - 12)
        return str(hour)
    return f"{hour:02d}"


def format_hour_label(hour: int, minute: int, hour_format: str) -> str:
    """``"06:00"`` in 24-hour mode, ``"6:00 AM"`` in 12-hour mode."""
    label = f"{_display_hour(hour, hour_format)}:{minute:02d}"
    if hour_format == "12":
        label += " AM" if hour < 12 else " PM"
    return label


def format_minute_label(minute: int, hour_format: str) -> str:
    # intra-hour rows only carry the minutes
    return f":{minute:02d}" if hour_format == "12" else f"{minute:02d}"


def generate_slots(start_hour: int, end_hour: int, interval_minutes: int, hour_format: str) -> List[TimeSlot]:
    if interval_minutes <= 0:
        return []
    slots: List[TimeSlot] = []
    for hour in range(start_hour, end_hour + 1):
        for minute in range(0, 60, interval_minutes):
            slots.append(
                TimeSlot(
                    hour=hour,
                    minute=minute,
                    label=format_hour_label(hour, minute, hour_format),
                    short_label=format_minute_label(minute, hour_format),
                )
            )
    return slots


def slot_count(start_hour: int, end_hour: int, interval_minutes: int) -> int:
    if interval_minutes <= 0 or end_hour < start_hour:
        return 0
    per_hour = len(range(0, 60, interval_minutes))
    return (end_hour - start_hour + 1) * per_hour
