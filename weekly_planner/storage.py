from __future__ import annotations

from pathlib import Path
from typing import Iterable

from . import config
from .models import Artifact, PlannerConfig, PlannerJob, get_session


ARTIFACT_NAMES = {
    "config": "config.json",
    "preview_1": "preview_1.png",
    "preview_2": "preview_2.png",
    "preview_3": "preview_3.png",
    "error": "error.log",
}


def document_stem(cfg: PlannerConfig) -> str:
    return f"weekly-planner-{cfg.year}-{cfg.paper_size.lower()}"


def job_dir(slug: str, base_dir: Path | None = None, include_slug: bool = True) -> Path:
    root = base_dir or config.OUT_DIR
    path = root / slug if include_slug else root
    path.mkdir(parents=True, exist_ok=True)
    return path


def artifact_path(
    slug: str,
    artifact_type: str,
    base_dir: Path | None = None,
    include_slug: bool = True,
) -> Path:
    # the document itself is named after the job: weekly-planner-<year>-<paper>.pdf
    filename = f"{slug}.pdf" if artifact_type == "pdf" else ARTIFACT_NAMES[artifact_type]
    return job_dir(slug, base_dir=base_dir, include_slug=include_slug) / filename


def record_artifacts(job: PlannerJob, artifacts: Iterable[tuple[str, Path]]) -> None:
    with get_session() as session:
        for artifact_type, path in artifacts:
            session.add(
                Artifact(
                    job_id=job.id,
                    type=artifact_type,
                    path=str(path.relative_to(config.OUT_DIR)),
                )
            )
        session.commit()
