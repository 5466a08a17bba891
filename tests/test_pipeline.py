from __future__ import annotations

import tempfile
from pathlib import Path
import unittest
from unittest import mock

from sqlmodel import select

from weekly_planner import config
from weekly_planner.models import Artifact, JobStatus, get_session, reset_engine
from weekly_planner.pipeline.run import list_jobs, retry_failed, run_generation

from conftest import build_config


class GenerationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.out_dir = Path(self.temp_dir.name)
        config.set_out_dir(self.out_dir)
        reset_engine()

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_generation_outputs_expected_artifacts(self) -> None:
        job = run_generation(build_config())
        self.assertEqual(job.status, JobStatus.READY)
        self.assertEqual(job.week_count, 5)
        self.assertEqual(job.page_count, 15)
        self.assertEqual(job.slug, "weekly-planner-2025-a4")

        job_dir = self.out_dir / job.slug
        self.assertTrue((job_dir / "weekly-planner-2025-a4.pdf").exists())
        self.assertTrue((job_dir / "config.json").exists())
        for index in range(1, 4):
            self.assertTrue((job_dir / f"preview_{index}.png").exists())
        self.assertFalse((self.out_dir / f"{job.slug}.tmp").exists())
        self.assertFalse((job_dir / "error.log").exists())

        with get_session() as session:
            artifacts = list(session.exec(select(Artifact).where(Artifact.job_id == job.id)))
        self.assertEqual(
            sorted(artifact.type for artifact in artifacts),
            ["config", "pdf", "preview_1", "preview_2", "preview_3"],
        )

    def test_previews_can_be_skipped(self) -> None:
        job = run_generation(build_config(paper_size="A3"), with_previews=False)
        self.assertEqual(job.status, JobStatus.READY)
        job_dir = self.out_dir / "weekly-planner-2025-a3"
        self.assertTrue((job_dir / "weekly-planner-2025-a3.pdf").exists())
        self.assertFalse((job_dir / "preview_1.png").exists())

    def test_inverted_months_are_rejected(self) -> None:
        job = run_generation(build_config(start_month=3, end_month=2))
        self.assertEqual(job.status, JobStatus.FAILED)
        self.assertEqual(job.fail_code, "INVALID_CONFIG")
        self.assertEqual(job.page_count, 0)
        job_dir = self.out_dir / job.slug
        self.assertIn("end_month", (job_dir / "error.log").read_text(encoding="utf-8"))
        self.assertFalse((job_dir / f"{job.slug}.pdf").exists())

    def test_backend_failure_discards_partial_output(self) -> None:
        with mock.patch(
            "weekly_planner.pipeline.run.render_pdf", side_effect=RuntimeError("disk full")
        ):
            job = run_generation(build_config(), with_previews=False)
        self.assertEqual(job.status, JobStatus.FAILED)
        self.assertEqual(job.fail_code, "RENDER_ERROR")
        self.assertEqual(job.fail_detail, "disk full")
        self.assertFalse((self.out_dir / f"{job.slug}.tmp").exists())
        self.assertFalse((self.out_dir / job.slug / f"{job.slug}.pdf").exists())

    def test_failed_rerun_removes_previous_output(self) -> None:
        ready = run_generation(build_config())
        self.assertEqual(ready.status, JobStatus.READY)
        job_dir = self.out_dir / ready.slug
        self.assertTrue((job_dir / f"{ready.slug}.pdf").exists())

        with mock.patch(
            "weekly_planner.pipeline.run.render_pdf", side_effect=RuntimeError("disk full")
        ):
            failed = run_generation(build_config())
        self.assertEqual(failed.status, JobStatus.FAILED)
        self.assertEqual(failed.slug, ready.slug)
        self.assertEqual(sorted(path.name for path in job_dir.iterdir()), ["error.log"])
        self.assertEqual((job_dir / "error.log").read_text(encoding="utf-8"), "disk full")

    def test_retry_reruns_failed_jobs(self) -> None:
        with mock.patch(
            "weekly_planner.pipeline.run.render_pdf", side_effect=RuntimeError("disk full")
        ):
            failed = run_generation(build_config(), with_previews=False)
        self.assertEqual([job.id for job in list_jobs([JobStatus.FAILED])], [failed.id])

        results = retry_failed(with_previews=False)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].id, failed.id)
        self.assertEqual(results[0].status, JobStatus.READY)
        self.assertIsNone(results[0].fail_code)
        self.assertEqual(list_jobs([JobStatus.FAILED]), [])
        self.assertTrue((self.out_dir / failed.slug / f"{failed.slug}.pdf").exists())


if __name__ == "__main__":
    unittest.main()
