"""
Seed corpus - exactly `sample_size` seeds for one settings value.

Cached seeds are reused first; the remaining slots are filled by calling the
generator, persisting every success immediately. Failed attempts do not use
up a slot but draw from the error budget, and sampling aborts as soon as the
budget is exceeded.

The corpus is built eagerly: once the constructor returns, every seed is in
hand, so consumers never see a partial corpus.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from typing import Any, Protocol

from seedstats.components.seeds.error_budget_comp import (
    DEFAULT_ERROR_MESSAGE_LIMIT,
    ErrorBudget,
    default_tolerated_errors,
)
from seedstats.helpers.exceptions import InvalidConfigurationError, SeedGenerationError
from seedstats.persistence.seed_storage import SeedStorage

logger = logging.getLogger(__name__)


class SeedGenerator(Protocol):
    """External generation engine. Signals a failed attempt with SeedGenerationError."""

    def generate(self, graph: Any, settings: Any) -> Any: ...


class _CallableGenerator:
    def __init__(self, fn: Callable[[Any, Any], Any]) -> None:
        self._fn = fn

    def generate(self, graph: Any, settings: Any) -> Any:
        return self._fn(graph, settings)

    def __repr__(self) -> str:
        return f"_CallableGenerator({getattr(self._fn, '__qualname__', self._fn)!r})"


def as_generator(generator: SeedGenerator | Callable[[Any, Any], Any]) -> SeedGenerator:
    """Accept either a generator object or a plain `fn(graph, settings)` callable."""
    if hasattr(generator, "generate"):
        return generator  # type: ignore[return-value]
    if callable(generator):
        return _CallableGenerator(generator)
    raise InvalidConfigurationError(f"Not a seed generator: {generator!r}")


class SeedCorpus:
    """
    Finite, single-pass sequence of seeds.

    Iterating consumes the corpus; construct a new one to resample.

    Raises (from the constructor):
        InvalidConfigurationError: For negative sizes or limits
        CorpusExhaustedError: When generation failed more than tolerated
        SeedStorageError: When the storage cannot be read or written
    """

    def __init__(
        self,
        settings: Any,
        sample_size: int,
        generator: SeedGenerator | Callable[[Any, Any], Any],
        storage: SeedStorage,
        graph: Any = None,
        tolerated_errors: int | None = None,
        error_message_limit: int | None = None,
    ) -> None:
        if sample_size < 0:
            raise InvalidConfigurationError(f"sample_size must be >= 0, got {sample_size}")
        if tolerated_errors is None:
            tolerated_errors = default_tolerated_errors(sample_size)
        if error_message_limit is None:
            error_message_limit = DEFAULT_ERROR_MESSAGE_LIMIT
        if tolerated_errors < 0 or error_message_limit < 0:
            raise InvalidConfigurationError("tolerated_errors and error_message_limit must be >= 0")

        self.settings = settings
        self.sample_size = sample_size
        self.budget = ErrorBudget(tolerated_errors=tolerated_errors, message_limit=error_message_limit)
        self.cached_count = 0
        self.generated_count = 0

        self._seeds = self._collect(as_generator(generator), storage, graph)
        self._position = 0

    def _collect(self, generator: SeedGenerator, storage: SeedStorage, graph: Any) -> list[Any]:
        seeds = storage.load_cached(self.settings)[: self.sample_size]
        self.cached_count = len(seeds)
        if self.cached_count:
            logger.info(f"[corpus] Reusing {self.cached_count}/{self.sample_size} cached seeds")

        missing = self.sample_size - self.cached_count
        if missing == 0:
            return seeds

        logger.info(f"[corpus] Generating {missing} seeds (tolerating {self.budget.tolerated_errors} errors)")
        start = time.time()
        while len(seeds) < self.sample_size:
            try:
                seed = generator.generate(graph, self.settings)
            except SeedGenerationError as e:
                logger.debug(f"[corpus] Generation attempt failed: {e}")
                self.budget.record(str(e))
                self.budget.check()
                continue

            storage.store(self.settings, seed)
            seeds.append(seed)
            self.generated_count += 1

        logger.info(
            f"[corpus] Generated {self.generated_count} seeds in {time.time() - start:.1f}s "
            f"({self.budget.failure_count} failed attempts)"
        )
        return seeds

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._position >= len(self._seeds):
            raise StopIteration
        seed = self._seeds[self._position]
        self._position += 1
        return seed

    def __len__(self) -> int:
        """Seeds not yet consumed."""
        return len(self._seeds) - self._position
