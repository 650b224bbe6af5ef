"""
Clean command: remove cached seeds for a job's settings.
"""

from __future__ import annotations

import argparse

from seedstats.helpers.exceptions import SeedStatsError
from seedstats.interfaces.cli.ui import print_error, print_success
from seedstats.services.config_svc import ConfigService
from seedstats.services.stats_svc import StatsService
from seedstats.workflows.stats.load_job_wf import load_job_workflow


def cmd_clean(args: argparse.Namespace) -> int:
    """Drop the seed storage for the job's settings."""
    overrides = {"seed_storage_dir": args.storage_dir} if args.storage_dir else None
    service = StatsService(ConfigService(overrides))

    try:
        job = load_job_workflow(args.job)
        service.clean(job)
    except SeedStatsError as e:
        print_error(str(e))
        return 1

    print_success(f"Cleaned seed storage for {args.job}")
    return 0
