from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, Tuple
import json


BASE_DIR = Path(__file__).resolve().parents[1]
OUT_DIR = BASE_DIR / "out"
DB_PATH = OUT_DIR / "planner.db"
STYLE_PRESET_PATH = Path(__file__).resolve().parent / "assets" / "planner_style.json"

# millimetres, portrait
PAPER_SIZES: Dict[str, Tuple[float, float]] = {
    "A4": (210.0, 297.0),
    "A3": (297.0, 420.0),
}

ALLOWED_LANGUAGES = {"en", "es", "fr", "de"}
ALLOWED_HOUR_FORMATS = {"12", "24"}
ALLOWED_INTERVALS = {10, 15, 20, 30, 60}

DEFAULT_CONFIG: Dict[str, object] = {
    "year": date.today().year,
    "start_month": 1,
    "end_month": 12,
    "paper_size": "A4",
    "language": "en",
    "week_start_day": 1,
    "week_end_day": 5,
    "start_hour": 6,
    "end_hour": 23,
    "hour_format": "24",
    "time_intervals": 20,
    "show_header": True,
    "show_grid": True,
}

PREVIEW_PAGE_COUNT = 3


def load_style_preset() -> dict:
    with STYLE_PRESET_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def set_out_dir(path: Path) -> None:
    global OUT_DIR, DB_PATH
    OUT_DIR = path
    DB_PATH = OUT_DIR / "planner.db"
