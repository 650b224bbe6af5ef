"""
Stand-in seed generator used by job-file and CLI tests.

Produces spoiler-shaped seeds deterministically from an internal counter.
"""

from __future__ import annotations

import itertools
import random
from typing import Any

from seedstats.helpers.exceptions import SeedGenerationError

SPAWNS = ["MarshSpawn.Main", "HowlsDen.Teleporter", "GladesTown.Teleporter"]
ZONES = ["Marsh", "Hollow", "Glades", "Wellspring"]
ITEMS = ["Bash", "DoubleJump", "Launch", "Grapple", "Dash"]

_counter = itertools.count()


def load_graph() -> dict[str, Any]:
    return {"nodes": len(ZONES)}


def generate(graph: Any, settings: Any) -> dict[str, Any]:
    rng = random.Random(next(_counter))
    items = ITEMS[:]
    rng.shuffle(items)
    spheres = [
        [{"location": f"{zone}.Pickup{index}", "zone": zone, "item": item}]
        for index, (zone, item) in enumerate(zip(rng.choices(ZONES, k=len(items)), items))
    ]
    return {
        "spawn": rng.choice(SPAWNS),
        "goals": list(settings.get("goals", [])),
        "spheres": spheres,
    }


def always_fail(graph: Any, settings: Any) -> dict[str, Any]:
    raise SeedGenerationError("Failed to place Launch: no reachable locations")
