"""
Seed storage - persistent cache of generated seeds, keyed by settings.

Seeds are stored as soon as they are generated so an aborted run never loses
completed work. Two backends are provided:
- FileSeedStorage: one directory per settings key, one JSON file per seed
- MemorySeedStorage: process-local dict, used by tests and one-off runs

No cross-process locking is performed; one process at a time is assumed.
"""

from __future__ import annotations

import json
import logging
import shutil
import uuid
from collections import defaultdict
from pathlib import Path
from typing import Any, Protocol

from seedstats.helpers.exceptions import SeedStorageError
from seedstats.helpers.settings_key_helper import describe_settings, settings_key
from seedstats.helpers.time_helper import now_ms

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"
SEED_SUFFIX = ".seed.json"


class SeedStorage(Protocol):
    """Capabilities the seed corpus needs from a persistent store."""

    def load_cached(self, settings: Any) -> list[Any]: ...

    def store(self, settings: Any, seed: Any) -> None: ...

    def clean(self, settings: Any) -> None: ...


class FileSeedStorage:
    """
    Filesystem-backed seed storage.

    Layout:
        <root>/<settings_key>/settings.json          settings, for humans
        <root>/<settings_key>/<ms>-<n>-<id>.seed.json    one file per seed

    Seeds must be JSON-serializable. They are loaded back in generation order.
    """

    def __init__(self, root_dir: str | Path) -> None:
        self.root_dir = Path(root_dir)
        self._sequence = 0

    def settings_dir(self, settings: Any) -> Path:
        """Directory holding the seeds for these settings."""
        return self.root_dir / settings_key(settings)

    def load_cached(self, settings: Any) -> list[Any]:
        directory = self.settings_dir(settings)
        if not directory.is_dir():
            logger.debug(f"[storage] No cached seeds in {directory}")
            return []

        seeds: list[Any] = []
        for seed_file in sorted(directory.glob(f"*{SEED_SUFFIX}")):
            try:
                with open(seed_file, encoding="utf-8") as f:
                    seeds.append(json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                raise SeedStorageError(f"Failed to read cached seed {seed_file}: {e}") from e

        logger.debug(f"[storage] Loaded {len(seeds)} cached seeds from {directory}")
        return seeds

    def store(self, settings: Any, seed: Any) -> None:
        directory = self.settings_dir(settings)
        self._sequence += 1
        seed_file = directory / f"{now_ms():013d}-{self._sequence:06d}-{uuid.uuid4().hex[:8]}{SEED_SUFFIX}"
        # Readers only ever glob complete *.seed.json files
        tmp_file = seed_file.with_suffix(".tmp")
        try:
            directory.mkdir(parents=True, exist_ok=True)
            settings_file = directory / SETTINGS_FILE
            if not settings_file.exists():
                settings_file.write_text(describe_settings(settings), encoding="utf-8")
            with open(tmp_file, "w", encoding="utf-8") as f:
                json.dump(seed, f)
            tmp_file.replace(seed_file)
        except (OSError, TypeError, ValueError) as e:
            tmp_file.unlink(missing_ok=True)
            raise SeedStorageError(f"Failed to store seed in {directory}: {e}") from e

    def clean(self, settings: Any) -> None:
        directory = self.settings_dir(settings)
        if not directory.exists():
            return
        try:
            shutil.rmtree(directory)
        except OSError as e:
            raise SeedStorageError(f"Failed to clean seed storage {directory}: {e}") from e
        logger.info(f"[storage] Removed {directory}")


class MemorySeedStorage:
    """In-process seed storage; seeds live as long as the instance."""

    def __init__(self) -> None:
        self._seeds: dict[str, list[Any]] = defaultdict(list)

    def load_cached(self, settings: Any) -> list[Any]:
        return list(self._seeds.get(settings_key(settings), []))

    def store(self, settings: Any, seed: Any) -> None:
        self._seeds[settings_key(settings)].append(seed)

    def clean(self, settings: Any) -> None:
        self._seeds.pop(settings_key(settings), None)

    def count(self, settings: Any) -> int:
        """Number of seeds stored for these settings."""
        return len(self._seeds.get(settings_key(settings), []))
