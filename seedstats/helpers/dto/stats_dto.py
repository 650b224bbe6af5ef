"""
Stats domain DTOs.

Data transfer objects for stats requests and loaded stats jobs.
These form cross-layer contracts between workflows, services, and interfaces.

Rules:
- Import only stdlib and typing at runtime (analyzer types are for annotations only)
- Pure data structures only (no I/O, no generation, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from seedstats.components.analyzers.analyzer_comp import ChainedAnalyzers
    from seedstats.components.seeds.seed_corpus_comp import SeedGenerator


@dataclass
class StatsArgs:
    """
    Arguments passed to generate_stats.

    Each entry of ``analyzers`` is treated separately, as though stats were
    generated once per chain, but the analyzers inside one chain are combined:
    chaining a spawn analyzer with a zone analyzer counts zones per spawn.
    """

    # Opaque settings value; its structure is the seed storage cache key
    settings: Any

    # How many seeds to analyze
    sample_size: int

    # Any number of analyzer chains
    analyzers: list[ChainedAnalyzers]

    # Logic graph handed to the generator untouched
    graph: Any = None

    # Generation errors tolerated before aborting (None = derived from sample_size)
    tolerated_errors: int | None = None

    # Error messages kept for the abort report (None = config default)
    error_message_limit: int | None = None

    # Clean the seed storage for these settings before sampling
    overwrite_seed_storage: bool = False


@dataclass
class StatsJob:
    """A stats request loaded from a job file, with its generator resolved."""

    args: StatsArgs
    generator: SeedGenerator
    source: str | None = None
