"""
Stats service - runs stats jobs against the configured seed storage.

Fills in configuration defaults the job left open (failure budget, message
limit), delegates to the stats workflow, and writes the CSV reports.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path

from seedstats.components.stats.stats_export_comp import write_csv_reports
from seedstats.components.stats.stats_report_comp import StatsReport
from seedstats.helpers.dto.stats_dto import StatsJob
from seedstats.persistence.seed_storage import FileSeedStorage, SeedStorage
from seedstats.services.config_svc import ConfigService
from seedstats.workflows.stats.generate_stats_wf import generate_stats_workflow

logger = logging.getLogger(__name__)


@dataclass
class StatsRunResult:
    """Reports of one run and the CSV files written for them."""

    reports: list[StatsReport]
    written: list[Path]


class StatsService:
    """Long-lived entry point for running stats jobs."""

    def __init__(self, config: ConfigService, storage: SeedStorage | None = None) -> None:
        self.config = config
        self.storage = storage or FileSeedStorage(str(config.get("seed_storage_dir")))

    def run(
        self,
        job: StatsJob,
        sample_size: int | None = None,
        overwrite: bool = False,
        output_dir: str | Path | None = None,
    ) -> StatsRunResult:
        """
        Run a job; CLI-level options override the job file.

        Args:
            job: Loaded stats job
            sample_size: Replace the job's sample size
            overwrite: Clean the seed storage for the job's settings first
            output_dir: Where to write CSV files (None = config output_dir, "" = don't write)
        """
        args = job.args
        if sample_size is not None:
            args = dataclasses.replace(args, sample_size=sample_size)
        if overwrite:
            args = dataclasses.replace(args, overwrite_seed_storage=True)
        if args.tolerated_errors is None:
            args = dataclasses.replace(args, tolerated_errors=self.config.tolerated_errors_for(args.sample_size))
        if args.error_message_limit is None:
            args = dataclasses.replace(args, error_message_limit=int(self.config.get("error_message_limit")))

        logger.info(
            f"[stats] Running {job.source or 'job'}: {args.sample_size} seeds, "
            f"{len(args.analyzers)} chains, tolerating {args.tolerated_errors} errors"
        )
        reports = generate_stats_workflow(args, job.generator, self.storage)

        if output_dir is None:
            output_dir = str(self.config.get("output_dir"))
        written = write_csv_reports(reports, output_dir) if output_dir else []
        return StatsRunResult(reports=reports, written=written)

    def clean(self, job: StatsJob) -> None:
        """Drop every cached seed for the job's settings."""
        self.storage.clean(job.args.settings)
        logger.info("[stats] Cleaned seed storage for these settings")
