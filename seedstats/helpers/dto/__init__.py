"""
Data transfer objects shared across layers.
"""

from .stats_dto import StatsArgs, StatsJob

__all__ = [
    "StatsArgs",
    "StatsJob",
]
