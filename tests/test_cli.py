from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from weekly_planner.main import app


runner = CliRunner()

JANUARY = ["--year", "2025", "--start-month", "1", "--end-month", "1"]


def test_dry_run_reports_pages(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", "--out", str(tmp_path), *JANUARY, "--dry-run"])
    assert result.exit_code == 0
    assert "weekly-planner-2025-a4.pdf" in result.output
    assert "Pages: 15" in result.output


def test_invalid_options_exit_with_usage_code(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["generate", "--out", str(tmp_path), "--year", "2025", "--start-month", "3", "--end-month", "2"]
    )
    assert result.exit_code == 2


def test_generate_and_history(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", "--out", str(tmp_path), *JANUARY, "--no-preview", "--no-grid"])
    assert result.exit_code == 0
    assert (tmp_path / "weekly-planner-2025-a4" / "weekly-planner-2025-a4.pdf").exists()

    history = runner.invoke(app, ["history", "--out", str(tmp_path)])
    assert history.exit_code == 0
    assert "READY" in history.output
    assert "15 pages" in history.output


def test_config_file_with_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "planner.json"
    config_path.write_text('{"year": 2025, "startMonth": 2, "endMonth": 2, "paperSize": "A3"}', encoding="utf-8")
    result = runner.invoke(
        app, ["generate", "--out", str(tmp_path), "--config", str(config_path), "--week-start", "0", "--dry-run"]
    )
    assert result.exit_code == 0
    assert "weekly-planner-2025-a3.pdf" in result.output


def test_first_year_is_rejected_before_rendering(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "generate", "--out", str(tmp_path),
            "--year", "1", "--start-month", "1", "--end-month", "1",
            "--week-start", "0", "--week-end", "6", "--dry-run",
        ],
    )
    assert result.exit_code == 2
