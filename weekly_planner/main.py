from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import config
from .models import JobStatus, reset_engine
from .pipeline.ingest import config_from_mapping, load_config
from .pipeline.render_pdf import PAGES_PER_WEEK, estimate_page_count, exact_page_count
from .pipeline.run import list_jobs, retry_failed, run_generation
from .pipeline.validate import validate_config
from .storage import document_stem

app = typer.Typer(help="Printable weekly planner generator")


def _setup(out: Optional[Path], verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if out:
        config.set_out_dir(out)
        reset_engine()


@app.command()
def generate(
    config_file: Optional[Path] = typer.Option(None, "--config", help="JSON file with planner settings"),
    year: Optional[int] = typer.Option(None, "--year"),
    start_month: Optional[int] = typer.Option(None, "--start-month", help="1-12"),
    end_month: Optional[int] = typer.Option(None, "--end-month", help="1-12"),
    paper_size: Optional[str] = typer.Option(None, "--paper-size", help="A4 or A3"),
    language: Optional[str] = typer.Option(None, "--language", help="en, es, fr or de"),
    week_start_day: Optional[int] = typer.Option(None, "--week-start", help="0=Sunday .. 6=Saturday"),
    week_end_day: Optional[int] = typer.Option(None, "--week-end", help="0=Sunday .. 6=Saturday"),
    start_hour: Optional[int] = typer.Option(None, "--start-hour", help="0-23"),
    end_hour: Optional[int] = typer.Option(None, "--end-hour", help="0-23"),
    hour_format: Optional[str] = typer.Option(None, "--hour-format", help="12 or 24"),
    time_intervals: Optional[int] = typer.Option(None, "--interval", help="Minutes per row: 10, 15, 20, 30 or 60"),
    show_header: Optional[bool] = typer.Option(None, "--header/--no-header"),
    show_grid: Optional[bool] = typer.Option(None, "--grid/--no-grid"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    preview: bool = typer.Option(True, "--preview/--no-preview", help="Also write PNG previews"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only report the page count"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    _setup(out, verbose)
    try:
        values = load_config(config_file).to_dict() if config_file else {}
        overrides = {
            "year": year,
            "start_month": start_month,
            "end_month": end_month,
            "paper_size": paper_size,
            "language": language,
            "week_start_day": week_start_day,
            "week_end_day": week_end_day,
            "start_hour": start_hour,
            "end_hour": end_hour,
            "hour_format": hour_format,
            "time_intervals": time_intervals,
            "show_header": show_header,
            "show_grid": show_grid,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        cfg = config_from_mapping(values)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2)

    errors = validate_config(cfg)
    if errors:
        for error in errors:
            typer.echo(f"Invalid configuration: {error}", err=True)
        raise typer.Exit(code=2)

    if dry_run:
        pages = exact_page_count(cfg)
        typer.echo(f"{document_stem(cfg)}.pdf")
        typer.echo(f"Weeks: {pages // PAGES_PER_WEEK}")
        typer.echo(f"Pages: {pages} (estimate ~{estimate_page_count(cfg)})")
        return

    typer.echo("Generating your planner...")
    job = run_generation(cfg, with_previews=preview)
    if job.status == JobStatus.FAILED:
        typer.echo(f"FAILED: {job.fail_code}: {job.fail_detail}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"READY: {config.OUT_DIR / job.slug / (job.slug + '.pdf')}")
    typer.echo(f"Pages: {job.page_count}")


@app.command()
def retry(
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    preview: bool = typer.Option(True, "--preview/--no-preview"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    _setup(out, verbose)
    jobs = retry_failed(with_previews=preview)
    if not jobs:
        typer.echo("No jobs to retry")
        return
    ready = [job for job in jobs if job.status == JobStatus.READY]
    typer.echo(f"READY: {len(ready)}")
    typer.echo(f"FAILED: {len(jobs) - len(ready)}")


@app.command()
def history(
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
) -> None:
    _setup(out, False)
    jobs = list_jobs()
    if not jobs:
        typer.echo("No jobs recorded")
        return
    for job in jobs:
        line = f"{job.id}\t{JobStatus(job.status).value}\t{job.slug}\t{job.page_count} pages"
        if job.fail_code:
            line += f"\t{job.fail_code}"
        typer.echo(line)


if __name__ == "__main__":
    app()
