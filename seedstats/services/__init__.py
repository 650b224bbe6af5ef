"""
Services package.
"""

from .config_svc import ConfigService
from .stats_svc import StatsRunResult, StatsService

__all__ = [
    "ConfigService",
    "StatsRunResult",
    "StatsService",
]
