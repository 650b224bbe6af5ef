"""Unit tests for seed storage backends."""

import json

import pytest

from seedstats.helpers.exceptions import SeedStorageError
from seedstats.helpers.settings_key_helper import settings_key
from seedstats.persistence.seed_storage import FileSeedStorage, MemorySeedStorage


@pytest.mark.unit
class TestFileSeedStorage:
    def test_missing_directory_is_empty(self, tmp_path, settings):
        assert FileSeedStorage(tmp_path).load_cached(settings) == []

    def test_store_then_load_in_order(self, tmp_path, settings):
        storage = FileSeedStorage(tmp_path)
        for i in range(5):
            storage.store(settings, {"id": i})

        assert FileSeedStorage(tmp_path).load_cached(settings) == [{"id": i} for i in range(5)]

    def test_layout(self, tmp_path, settings):
        storage = FileSeedStorage(tmp_path)
        storage.store(settings, {"id": 1})

        directory = tmp_path / settings_key(settings)
        assert storage.settings_dir(settings) == directory
        assert json.loads((directory / "settings.json").read_text(encoding="utf-8")) == settings
        assert len(list(directory.glob("*.seed.json"))) == 1
        assert list(directory.glob("*.tmp")) == []

    def test_settings_are_isolated(self, tmp_path, settings):
        storage = FileSeedStorage(tmp_path)
        storage.store(settings, {"id": 1})

        assert storage.load_cached({**settings, "difficulty": "unsafe"}) == []

    def test_clean_removes_only_these_settings(self, tmp_path, settings):
        storage = FileSeedStorage(tmp_path)
        other = {"difficulty": "gorlek"}
        storage.store(settings, {"id": 1})
        storage.store(other, {"id": 2})

        storage.clean(settings)

        assert storage.load_cached(settings) == []
        assert storage.load_cached(other) == [{"id": 2}]

    def test_clean_missing_is_noop(self, tmp_path, settings):
        FileSeedStorage(tmp_path / "nowhere").clean(settings)

    def test_corrupt_seed_file(self, tmp_path, settings):
        storage = FileSeedStorage(tmp_path)
        storage.store(settings, {"id": 1})
        (storage.settings_dir(settings) / "9999999999999-000001-deadbeef.seed.json").write_text("{", encoding="utf-8")

        with pytest.raises(SeedStorageError, match="Failed to read"):
            storage.load_cached(settings)

    def test_unserializable_seed_leaves_no_partial_file(self, tmp_path, settings):
        storage = FileSeedStorage(tmp_path)
        storage.store(settings, {"id": 1})

        with pytest.raises(SeedStorageError, match="Failed to store"):
            storage.store(settings, {"id": object()})

        directory = storage.settings_dir(settings)
        assert list(directory.glob("*.tmp")) == []
        assert len(list(directory.iterdir())) == 2
        assert storage.load_cached(settings) == [{"id": 1}]


@pytest.mark.unit
class TestMemorySeedStorage:
    def test_roundtrip_and_clean(self, memory_storage, settings):
        memory_storage.store(settings, "a")
        memory_storage.store(settings, "b")

        assert memory_storage.load_cached(settings) == ["a", "b"]
        assert memory_storage.count(settings) == 2

        memory_storage.clean(settings)
        assert memory_storage.load_cached(settings) == []

    def test_loaded_list_is_a_copy(self, memory_storage, settings):
        memory_storage.store(settings, "a")
        memory_storage.load_cached(settings).append("b")

        assert memory_storage.count(settings) == 1
