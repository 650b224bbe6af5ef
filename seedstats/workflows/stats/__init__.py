"""Stats workflows package."""

from .generate_stats_wf import generate_stats_workflow, validate_stats_args
from .load_job_wf import load_job_workflow, parse_job, resolve_import_path

__all__ = [
    "generate_stats_workflow",
    "load_job_workflow",
    "parse_job",
    "resolve_import_path",
    "validate_stats_args",
]
