"""
Pytest fixtures and configuration for the test suite.

Strategy:
- In-memory seed storage for unit tests, tmp_path for filesystem storage
- Scripted generators instead of a real generation engine
- Test doubles live in tests/fixtures/doubles.py
"""

import os
import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import seedstats package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from seedstats.persistence.seed_storage import MemorySeedStorage  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def settings() -> dict[str, Any]:
    """Opaque settings value used as the storage key."""
    return {"difficulty": "moki", "goals": ["trees"], "spawn": "random"}


@pytest.fixture
def memory_storage() -> MemorySeedStorage:
    """Fresh in-memory seed storage."""
    return MemorySeedStorage()


@pytest.fixture
def fake_seedgen(monkeypatch) -> str:
    """Make tests/fixtures importable; returns the module name of the fake generator."""
    monkeypatch.syspath_prepend(str(FIXTURES_DIR))
    return "fake_seedgen"


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    """Run with no SEEDSTATS_* env vars and a cwd without config/config.yaml."""
    for key in list(os.environ):
        if key.startswith("SEEDSTATS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
