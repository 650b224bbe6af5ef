"""
Helpers package.
"""

from .dto.stats_dto import StatsArgs, StatsJob
from .exceptions import (
    AnalyzerError,
    CorpusExhaustedError,
    InvalidConfigurationError,
    ReportExportError,
    SeedGenerationError,
    SeedStatsError,
    SeedStorageError,
)
from .settings_key_helper import settings_key

__all__ = [
    "AnalyzerError",
    "CorpusExhaustedError",
    "InvalidConfigurationError",
    "ReportExportError",
    "SeedGenerationError",
    "SeedStatsError",
    "SeedStorageError",
    "StatsArgs",
    "StatsJob",
    "settings_key",
]
