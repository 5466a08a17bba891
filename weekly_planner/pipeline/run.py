from __future__ import annotations

from pathlib import Path
import json
import logging
import shutil
from typing import Iterable, List

from sqlmodel import select

from .. import config
from ..models import JobStatus, PlannerConfig, PlannerJob, get_session, init_db
from ..storage import artifact_path, document_stem, record_artifacts
from .ingest import config_from_mapping
from .render_pdf import render_pdf
from .render_preview import render_previews
from .validate import validate_config
from .weeks import enumerate_weeks


logger = logging.getLogger(__name__)


class GenerationError(Exception):
    def __init__(self, code: str, detail: str) -> None:
        super().__init__(detail)
        self.code = code
        self.detail = detail


def _save(job: PlannerJob) -> PlannerJob:
    with get_session() as session:
        session.add(job)
        session.commit()
        session.refresh(job)
    return job


def _write_error(slug: str, message: str) -> None:
    # a failed run leaves only its error log behind
    stale_dir = config.OUT_DIR / slug
    if stale_dir.exists():
        shutil.rmtree(stale_dir)
    error_path = artifact_path(slug, "error", base_dir=config.OUT_DIR)
    error_path.write_text(message, encoding="utf-8")


def _prepare_temp_dir(slug: str) -> Path:
    temp_dir = config.OUT_DIR / f"{slug}.tmp"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
    temp_dir.mkdir(parents=True, exist_ok=True)
    return temp_dir


def _finalize_artifacts(
    temp_dir: Path,
    final_dir: Path,
    artifacts: List[tuple[str, Path]],
) -> List[tuple[str, Path]]:
    if final_dir.exists():
        shutil.rmtree(final_dir)
    temp_dir.replace(final_dir)
    return [(artifact_type, final_dir / path.relative_to(temp_dir)) for artifact_type, path in artifacts]


def _check_renderable(cfg: PlannerConfig) -> int:
    errors = validate_config(cfg)
    if errors:
        raise GenerationError("INVALID_CONFIG", "\n".join(errors))
    week_count = len(enumerate_weeks(cfg.year, cfg.start_month, cfg.end_month, cfg.week_start_day))
    if week_count == 0:
        raise GenerationError("EMPTY_DOCUMENT", "Configuration produces no weeks")
    return week_count


def _render_artifacts(
    cfg: PlannerConfig,
    slug: str,
    temp_dir: Path,
    with_previews: bool,
) -> tuple[List[tuple[str, Path]], int]:
    artifacts: List[tuple[str, Path]] = []

    config_path = artifact_path(slug, "config", base_dir=temp_dir, include_slug=False)
    config_path.write_text(json.dumps(cfg.to_dict(), indent=2), encoding="utf-8")
    artifacts.append(("config", config_path))

    pdf_path = artifact_path(slug, "pdf", base_dir=temp_dir, include_slug=False)
    summary = render_pdf(cfg, pdf_path)
    artifacts.append(("pdf", pdf_path))

    if with_previews:
        previews = render_previews(slug, pdf_path, base_dir=temp_dir, include_slug=False)
        artifacts.extend((f"preview_{index + 1}", path) for index, path in enumerate(previews))
    return artifacts, summary.page_count


def process_job(job: PlannerJob, cfg: PlannerConfig, with_previews: bool = True) -> PlannerJob:
    job.status = JobStatus.RUNNING
    job.fail_code = None
    job.fail_detail = None
    _save(job)
    logger.info("Generating %s (job %s)", job.slug, job.id)

    temp_dir: Path | None = None
    try:
        job.week_count = _check_renderable(cfg)
        temp_dir = _prepare_temp_dir(job.slug)
        artifacts, job.page_count = _render_artifacts(cfg, job.slug, temp_dir, with_previews)
        artifacts = _finalize_artifacts(temp_dir, config.OUT_DIR / job.slug, artifacts)
    except GenerationError as exc:
        logger.warning("Job %s rejected: %s", job.id, exc.code)
        return _fail(job, exc.code, exc.detail)
    except Exception as exc:
        logger.exception("Generation error for %s", job.slug)
        if temp_dir is not None:
            shutil.rmtree(temp_dir, ignore_errors=True)
        return _fail(job, "RENDER_ERROR", str(exc) or exc.__class__.__name__)

    job.status = JobStatus.READY
    _save(job)
    record_artifacts(job, artifacts)
    logger.info("Job %s ready: %s weeks, %s pages", job.id, job.week_count, job.page_count)
    return job


def _fail(job: PlannerJob, code: str, detail: str) -> PlannerJob:
    job.status = JobStatus.FAILED
    job.page_count = 0
    job.fail_code = code
    job.fail_detail = detail.splitlines()[0] if detail else "Unknown error"
    _save(job)
    _write_error(job.slug, detail or "Unknown error")
    return job


def run_generation(cfg: PlannerConfig, with_previews: bool = True) -> PlannerJob:
    init_db()
    job = _save(PlannerJob(slug=document_stem(cfg), config_json=json.dumps(cfg.to_dict())))
    return process_job(job, cfg, with_previews=with_previews)


def list_jobs(statuses: Iterable[JobStatus] | None = None) -> List[PlannerJob]:
    init_db()
    with get_session() as session:
        statement = select(PlannerJob)
        if statuses:
            statement = statement.where(PlannerJob.status.in_(list(statuses)))
        return list(session.exec(statement.order_by(PlannerJob.id)))


def retry_failed(with_previews: bool = True) -> List[PlannerJob]:
    results: List[PlannerJob] = []
    for job in list_jobs([JobStatus.FAILED]):
        try:
            cfg = config_from_mapping(json.loads(job.config_json))
        except ValueError as exc:
            results.append(_fail(job, "INVALID_CONFIG", str(exc)))
            continue
        results.append(process_job(job, cfg, with_previews=with_previews))
    return results
