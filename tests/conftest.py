from __future__ import annotations

from typing import Callable

import pytest

from weekly_planner import config
from weekly_planner.config import load_style_preset
from weekly_planner.models import PlannerConfig, reset_engine


BASE_CONFIG = dict(
    year=2025,
    start_month=1,
    end_month=1,
    paper_size="A4",
    language="en",
    week_start_day=1,
    week_end_day=5,
    start_hour=6,
    end_hour=23,
    hour_format="24",
    time_intervals=20,
    show_header=True,
    show_grid=True,
)


def build_config(**overrides) -> PlannerConfig:
    return PlannerConfig(**{**BASE_CONFIG, **overrides})


@pytest.fixture
def make_config() -> Callable[..., PlannerConfig]:
    return build_config


@pytest.fixture
def style() -> dict:
    return load_style_preset()


@pytest.fixture(autouse=True)
def restore_out_dir():
    original = config.OUT_DIR
    yield
    config.set_out_dir(original)
    reset_engine()
