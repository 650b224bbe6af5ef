"""Write stats reports to disk as CSV files."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from seedstats.components.stats.stats_report_comp import StatsReport
from seedstats.helpers.exceptions import ReportExportError

logger = logging.getLogger(__name__)


def report_filename(report: StatsReport) -> str:
    """'Spawn location and Launch zone' -> 'spawn_location_and_launch_zone.csv'"""
    slug = re.sub(r"[^a-z0-9]+", "_", report.title().lower()).strip("_")
    return f"{slug or 'stats'}.csv"


def write_csv_reports(reports: Sequence[StatsReport], output_dir: str | Path) -> list[Path]:
    """
    Write every report to `<output_dir>/<slug>.csv`.

    Reports whose titles collide get a numeric suffix instead of overwriting
    each other.

    Returns:
        Paths written, in report order

    Raises:
        ReportExportError: If the directory or a file cannot be written
    """
    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ReportExportError(f"Cannot create output directory {directory}: {e}") from e

    written: list[Path] = []
    for report in reports:
        path = directory / report_filename(report)
        suffix = 2
        while path in written:
            path = directory / f"{path.stem.rsplit('-', 1)[0]}-{suffix}.csv"
            suffix += 1
        try:
            path.write_text(report.csv() + "\n", encoding="utf-8")
        except OSError as e:
            raise ReportExportError(f"Cannot write {path}: {e}") from e
        logger.info(f"[stats] Wrote {path}")
        written.append(path)
    return written
