"""
Workflows package.
"""

from .stats.generate_stats_wf import generate_stats_workflow
from .stats.load_job_wf import load_job_workflow

__all__ = [
    "generate_stats_workflow",
    "load_job_workflow",
]
