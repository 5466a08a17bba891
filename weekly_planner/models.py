from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from sqlmodel import Field, SQLModel, create_engine, Session

from . import config


@dataclass(frozen=True)
class PlannerConfig:
    year: int
    start_month: int
    end_month: int
    paper_size: str
    language: str
    week_start_day: int          # 0=Sunday .. 6=Saturday
    week_end_day: int
    start_hour: int
    end_hour: int
    hour_format: str             # "12" | "24"
    time_intervals: int          # minutes
    show_header: bool = True
    show_grid: bool = True

    @property
    def paper_dimensions(self) -> Tuple[float, float]:
        return config.PAPER_SIZES[self.paper_size]

    def to_dict(self) -> dict:
        return asdict(self)


class JobStatus(str, Enum):
    RUNNING = "RUNNING"
    READY = "READY"
    FAILED = "FAILED"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlannerJob(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(index=True)
    config_json: str
    status: JobStatus = Field(default=JobStatus.RUNNING)
    week_count: int = 0
    page_count: int = 0
    fail_code: Optional[str] = None
    fail_detail: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)


class Artifact(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    job_id: int = Field(foreign_key="plannerjob.id")
    type: str
    path: str
    created_at: datetime = Field(default_factory=_utcnow)


engine = create_engine(f"sqlite:///{config.DB_PATH}")


def reset_engine() -> None:
    global engine
    engine = create_engine(f"sqlite:///{config.DB_PATH}")


def init_db() -> None:
    config.OUT_DIR.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    return Session(engine, expire_on_commit=False)
