"""
Analyzer contract and chain evaluation.

An analyzer classifies one seed along a single axis and may return several
labels when the seed fits more than one class. A chain of analyzers yields
the Cartesian product of their labels, so ambiguity multiplies across axes
instead of collapsing to one representative label.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any

from seedstats.helpers.exceptions import AnalyzerError

StatsKey = tuple[str, ...]

CHAIN_TITLE_SEPARATOR = " and "


class Analyzer(ABC):
    """Stateless single-axis classifier; instances are shared between chains."""

    @abstractmethod
    def analyze(self, seed: Any) -> list[str]:
        """Labels for this seed; never empty."""

    @abstractmethod
    def title(self) -> str:
        """Constant column title for reports."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.title()!r})"


ChainedAnalyzers = Sequence[Analyzer]


def chain_title(chain: ChainedAnalyzers) -> str:
    """Analyzer titles joined with ' and '."""
    return CHAIN_TITLE_SEPARATOR.join(analyzer.title() for analyzer in chain)


def analyze_chain(chain: ChainedAnalyzers, seed: Any) -> Iterator[StatsKey]:
    """
    Yield every stats key of one seed for a chain.

    Example:
        Analyzer A returns ["x", "y"], analyzer B returns ["1"]:
        yields ("x", "1") and ("y", "1").

    Raises:
        AnalyzerError: If an analyzer returns no labels
    """
    label_sets = []
    for analyzer in chain:
        labels = [str(label) for label in analyzer.analyze(seed)]
        if not labels:
            raise AnalyzerError(f"Analyzer '{analyzer.title()}' returned no labels")
        label_sets.append(labels)
    return itertools.product(*label_sets)
