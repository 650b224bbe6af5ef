"""Workflow for generating stats over a seed corpus.

Orchestrates:
1. Request validation (before any seed is touched)
2. Optional cleaning of the seed storage for the settings
3. Seed corpus construction (cache first, then generation)
4. One pass over the corpus feeding every analyzer chain
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from seedstats.components.analyzers.analyzer_comp import Analyzer, analyze_chain
from seedstats.components.seeds.seed_corpus_comp import SeedCorpus, SeedGenerator
from seedstats.components.stats.stats_report_comp import StatsReport
from seedstats.helpers.dto.stats_dto import StatsArgs
from seedstats.helpers.exceptions import InvalidConfigurationError
from seedstats.helpers.settings_key_helper import canonical_settings
from seedstats.persistence.seed_storage import SeedStorage

logger = logging.getLogger(__name__)


def validate_stats_args(args: StatsArgs) -> None:
    """
    Reject malformed requests before sampling starts.

    Raises:
        InvalidConfigurationError: Describing the first problem found
    """
    if args.sample_size < 0:
        raise InvalidConfigurationError(f"sample_size must be >= 0, got {args.sample_size}")
    if args.tolerated_errors is not None and args.tolerated_errors < 0:
        raise InvalidConfigurationError(f"tolerated_errors must be >= 0, got {args.tolerated_errors}")
    if args.error_message_limit is not None and args.error_message_limit < 0:
        raise InvalidConfigurationError(f"error_message_limit must be >= 0, got {args.error_message_limit}")
    if not args.analyzers:
        raise InvalidConfigurationError("At least one analyzer chain is required")
    for index, chain in enumerate(args.analyzers):
        if not chain:
            raise InvalidConfigurationError(f"Analyzer chain {index} is empty")
        for analyzer in chain:
            if not isinstance(analyzer, Analyzer):
                raise InvalidConfigurationError(f"Analyzer chain {index} contains a non-analyzer: {analyzer!r}")
    # Settings must be usable as a storage key
    canonical_settings(args.settings)


def generate_stats_workflow(
    args: StatsArgs,
    generator: SeedGenerator | Callable[[Any, Any], Any],
    storage: SeedStorage,
) -> list[StatsReport]:
    """
    Generate one stats report per analyzer chain.

    Args:
        args: Stats request (settings, sample size, chains, tolerances)
        generator: Seed generator, or a `fn(graph, settings)` callable
        storage: Persistent seed storage

    Returns:
        Reports in the same order as args.analyzers

    Raises:
        InvalidConfigurationError: Malformed request
        CorpusExhaustedError: Too many generation failures
        SeedStorageError: Storage could not be read, written or cleaned
        AnalyzerError: An analyzer returned no labels
    """
    start = time.time()
    validate_stats_args(args)

    if args.overwrite_seed_storage:
        storage.clean(args.settings)
        logger.info("[stats] Cleaned seed storage for these settings")

    corpus = SeedCorpus(
        settings=args.settings,
        sample_size=args.sample_size,
        generator=generator,
        storage=storage,
        graph=args.graph,
        tolerated_errors=args.tolerated_errors,
        error_message_limit=args.error_message_limit,
    )

    reports = [StatsReport([analyzer.title() for analyzer in chain]) for chain in args.analyzers]

    for seed in corpus:
        for report, chain in zip(reports, args.analyzers):
            for key in analyze_chain(chain, seed):
                report.add(key)

    logger.info(f"[stats] Generated stats for {args.sample_size} seeds in {time.time() - start:.1f}s")
    return reports
