"""
Analyzer registry - build analyzers from names used in job files.

A spec is either a bare name ("spawn") or a mapping with a "name" entry and
constructor arguments ({"name": "item-zone", "item": "Launch"}).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from seedstats.components.analyzers.analyzer_comp import Analyzer, ChainedAnalyzers
from seedstats.components.analyzers.spoiler_analyzers_comp import (
    EarlyItemsAnalyzer,
    GoalAnalyzer,
    ItemSphereAnalyzer,
    ItemZoneAnalyzer,
    KeyAnalyzer,
    SpawnLocationAnalyzer,
    SphereCountAnalyzer,
)
from seedstats.helpers.exceptions import InvalidConfigurationError

ANALYZERS: dict[str, Callable[..., Analyzer]] = {
    "spawn": SpawnLocationAnalyzer,
    "goals": GoalAnalyzer,
    "item-zone": ItemZoneAnalyzer,
    "item-sphere": ItemSphereAnalyzer,
    "sphere-count": SphereCountAnalyzer,
    "early-items": EarlyItemsAnalyzer,
    "key": KeyAnalyzer,
}


def build_analyzer(spec: str | Mapping[str, Any]) -> Analyzer:
    """
    Instantiate one analyzer from its spec.

    Raises:
        InvalidConfigurationError: Unknown name or bad arguments
    """
    if isinstance(spec, str):
        name, kwargs = spec, {}
    elif isinstance(spec, Mapping) and "name" in spec:
        kwargs = dict(spec)
        name = str(kwargs.pop("name"))
    else:
        raise InvalidConfigurationError(f"Invalid analyzer spec: {spec!r}")

    factory = ANALYZERS.get(name)
    if factory is None:
        known = ", ".join(sorted(ANALYZERS))
        raise InvalidConfigurationError(f"Unknown analyzer '{name}' (known: {known})")

    try:
        return factory(**kwargs)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Invalid arguments for analyzer '{name}': {e}") from e


def build_chain(specs: str | Mapping[str, Any] | Sequence[Any]) -> ChainedAnalyzers:
    """Build a chain; a single spec is a chain of one."""
    if isinstance(specs, (str, Mapping)):
        return [build_analyzer(specs)]
    return [build_analyzer(spec) for spec in specs]
