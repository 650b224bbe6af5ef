"""
Test doubles shared across the suite.

- ScriptedGenerator replays a fixed list of outcomes (seed or Failure)
- make_seed builds spoiler-shaped seeds for the built-in analyzers
- StaticAnalyzer returns fixed labels, or labels looked up on the seed
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from seedstats.components.analyzers.analyzer_comp import Analyzer
from seedstats.helpers.exceptions import SeedGenerationError


class Failure:
    """Scripted generation failure."""

    def __init__(self, message: str = "generation failed") -> None:
        self.message = message


class ScriptedGenerator:
    """
    Generator that replays outcomes in order.

    Seeds are returned as-is; Failure entries raise SeedGenerationError.
    Once the script runs out, `fallback` is returned forever, or every call
    fails when there is no fallback.
    """

    def __init__(self, outcomes: Iterable[Any] = (), fallback: Any = None) -> None:
        self.outcomes = list(outcomes)
        self.fallback = fallback
        self.calls = 0
        self.graphs: list[Any] = []

    def generate(self, graph: Any, settings: Any) -> Any:
        self.calls += 1
        self.graphs.append(graph)
        if self.outcomes:
            outcome = self.outcomes.pop(0)
        elif self.fallback is not None:
            outcome = self.fallback
        else:
            outcome = Failure("script exhausted")
        if isinstance(outcome, Failure):
            raise SeedGenerationError(outcome.message)
        return outcome


class StaticAnalyzer(Analyzer):
    """Analyzer whose labels come from a function of the seed."""

    def __init__(self, title: str, labels: Callable[[Any], list[str]]) -> None:
        self._title = title
        self._labels = labels

    def analyze(self, seed: Any) -> list[str]:
        return self._labels(seed)

    def title(self) -> str:
        return self._title


def make_seed(
    spawn: str = "MarshSpawn.Main",
    goals: Iterable[str] = (),
    spheres: Iterable[Iterable[tuple[str, str]]] = (),
) -> dict[str, Any]:
    """Spoiler-shaped seed; spheres are lists of (zone, item) pairs."""
    return {
        "spawn": spawn,
        "goals": list(goals),
        "spheres": [
            [{"location": f"{zone}.Pickup", "zone": zone, "item": item} for zone, item in sphere]
            for sphere in spheres
        ],
    }
