"""
Built-in analyzers for spoiler-shaped seeds.

These analyzers expect the seed to be a mapping shaped like a seed spoiler:

    {
        "spawn": "MarshSpawn.Main",
        "goals": ["trees", "wisps"],
        "spheres": [
            [{"location": "MarshSpawn.Cache", "zone": "Marsh", "item": "Bash"}, ...],
            ...
        ],
    }

Each entry of "spheres" is one progression step: the placements reachable
once everything from the previous spheres has been collected.

Seeds of any other shape need their own Analyzer subclasses.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from seedstats.components.analyzers.analyzer_comp import Analyzer
from seedstats.helpers.exceptions import AnalyzerError

UNPLACED = "Unplaced"
NOTHING = "Nothing"


def _field(seed: Any, key: str) -> Any:
    if not isinstance(seed, Mapping) or key not in seed:
        raise AnalyzerError(f"Seed has no '{key}' field")
    return seed[key]


def _spheres(seed: Any) -> list[Sequence[Mapping[str, Any]]]:
    return list(_field(seed, "spheres"))


def _unique(values: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(values))


class KeyAnalyzer(Analyzer):
    """Value stored under a top-level key; list values produce one label per element."""

    def __init__(self, key: str, title: str | None = None) -> None:
        self.key = key
        self._title = title or key.replace("_", " ").capitalize()

    def analyze(self, seed: Any) -> list[str]:
        value = _field(seed, self.key)
        if isinstance(value, (list, tuple)):
            return _unique([str(v) for v in value])
        return [str(value)]

    def title(self) -> str:
        return self._title


class SpawnLocationAnalyzer(KeyAnalyzer):
    """Where the seed starts."""

    def __init__(self) -> None:
        super().__init__("spawn", "Spawn location")


class GoalAnalyzer(KeyAnalyzer):
    """Every goal the seed requires; seeds with several goals count once per goal."""

    def __init__(self) -> None:
        super().__init__("goals", "Goals")

    def analyze(self, seed: Any) -> list[str]:
        goals = super().analyze(seed)
        return goals or [NOTHING]


class ItemZoneAnalyzer(Analyzer):
    """Zones holding a given item (several labels when multiple copies are placed)."""

    def __init__(self, item: str) -> None:
        self.item = item

    def analyze(self, seed: Any) -> list[str]:
        zones = [
            str(placement.get("zone", UNPLACED))
            for sphere in _spheres(seed)
            for placement in sphere
            if placement.get("item") == self.item
        ]
        return _unique(zones) or [UNPLACED]

    def title(self) -> str:
        return f"{self.item} zone"


class ItemSphereAnalyzer(Analyzer):
    """Progression sphere (1-based) in which the first copy of an item is placed."""

    def __init__(self, item: str) -> None:
        self.item = item

    def analyze(self, seed: Any) -> list[str]:
        for index, sphere in enumerate(_spheres(seed), 1):
            if any(placement.get("item") == self.item for placement in sphere):
                return [str(index)]
        return [UNPLACED]

    def title(self) -> str:
        return f"{self.item} sphere"


class SphereCountAnalyzer(Analyzer):
    """How many progression spheres the seed needs."""

    def analyze(self, seed: Any) -> list[str]:
        return [str(len(_spheres(seed)))]

    def title(self) -> str:
        return "Spheres"


class EarlyItemsAnalyzer(Analyzer):
    """Items reachable within the first `spheres` progression spheres."""

    def __init__(self, spheres: int = 1) -> None:
        if spheres < 1:
            raise ValueError(f"spheres must be >= 1, got {spheres}")
        self.spheres = spheres

    def analyze(self, seed: Any) -> list[str]:
        items = [
            str(placement["item"])
            for sphere in _spheres(seed)[: self.spheres]
            for placement in sphere
            if "item" in placement
        ]
        return _unique(items) or [NOTHING]

    def title(self) -> str:
        if self.spheres == 1:
            return "Items in first sphere"
        return f"Items in first {self.spheres} spheres"
