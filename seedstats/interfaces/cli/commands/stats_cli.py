"""
Stats command: sample seeds for a job and print one table per analyzer chain.
"""

from __future__ import annotations

import argparse

from seedstats.helpers.exceptions import SeedStatsError
from seedstats.interfaces.cli.ui import InfoPanel, TableDisplay, print_error, print_info, print_success, show_spinner
from seedstats.services.config_svc import ConfigService
from seedstats.services.stats_svc import StatsService
from seedstats.workflows.stats.load_job_wf import load_job_workflow


def cmd_stats(args: argparse.Namespace) -> int:
    """
    Run a stats job, show the reports and write them as CSV.
    """
    overrides = {"seed_storage_dir": args.storage_dir} if args.storage_dir else None
    service = StatsService(ConfigService(overrides))

    try:
        job = load_job_workflow(args.job)
        sample_size = args.sample_size if args.sample_size is not None else job.args.sample_size
        result = show_spinner(
            f"Analyzing {sample_size} seeds...",
            service.run,
            job,
            sample_size=args.sample_size,
            overwrite=args.overwrite,
            output_dir=args.output_dir,
        )
    except SeedStatsError as e:
        print_error(str(e))
        return 1

    for report in result.reports:
        TableDisplay.show_report(report)

    content = f"""[bold]Job:[/bold] {args.job}
[bold]Seeds:[/bold] {sample_size}
[bold]Chains:[/bold] {len(result.reports)}"""
    InfoPanel.show("Stats Complete", content, "green")

    if not result.written:
        print_info("CSV export disabled (empty output directory)")
    for path in result.written:
        print_success(f"Wrote {path}")
    return 0
