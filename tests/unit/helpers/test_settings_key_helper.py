"""Unit tests for seedstats.helpers.settings_key_helper module."""

import json
from dataclasses import dataclass, field

import pytest

from seedstats.helpers.exceptions import InvalidConfigurationError
from seedstats.helpers.settings_key_helper import canonical_settings, describe_settings, settings_key


@dataclass
class WorldSettings:
    difficulty: str
    tricks: list[str] = field(default_factory=list)


class TestSettingsKey:
    """Structurally equal settings share a key."""

    @pytest.mark.unit
    def test_key_ignores_mapping_order(self) -> None:
        a = {"difficulty": "moki", "goals": ["trees"]}
        b = {"goals": ["trees"], "difficulty": "moki"}
        assert settings_key(a) == settings_key(b)

    @pytest.mark.unit
    def test_different_settings_get_different_keys(self) -> None:
        assert settings_key({"difficulty": "moki"}) != settings_key({"difficulty": "gorlek"})

    @pytest.mark.unit
    def test_key_is_short_hex(self) -> None:
        key = settings_key({"difficulty": "moki"})
        assert len(key) == 16
        int(key, 16)

    @pytest.mark.unit
    def test_dataclass_settings_match_equal_dataclass(self) -> None:
        assert settings_key(WorldSettings("moki", ["swordsentry"])) == settings_key(
            WorldSettings("moki", ["swordsentry"])
        )

    @pytest.mark.unit
    def test_dataclass_settings_are_described_as_fields(self) -> None:
        assert json.loads(describe_settings(WorldSettings("moki"))) == {"difficulty": "moki", "tricks": []}

    @pytest.mark.unit
    def test_unserializable_settings_are_invalid(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="cache key"):
            settings_key({"graph": object()})


@dataclass
class OtherSettings:
    difficulty: str
    tricks: list[str] = field(default_factory=list)


class TestSettingsKeyEquality:
    """Keys agree exactly when the settings compare equal."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "a, b",
        [
            ({"x": 1}, {"x": 1.0}),
            ({"x": True}, {"x": 1}),
            ({"x": [1, 2.0]}, {"x": [1.0, 2]}),
            ({"x": {1, 2}}, {"x": frozenset({2, 1})}),
            ({"x": {"y": 0}}, {"x": {"y": 0.0}}),
        ],
    )
    def test_equal_settings_share_a_key(self, a, b) -> None:
        assert a == b
        assert settings_key(a) == settings_key(b)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "a, b",
        [
            ({"x": 1}, {"x": "1"}),
            ({"x": [1, 2]}, {"x": (1, 2)}),
            ({"x": [1, 2]}, {"x": {1, 2}}),
            ({"x": 0.5}, {"x": 1}),
            (WorldSettings("moki"), {"difficulty": "moki", "tricks": []}),
            (WorldSettings("moki"), OtherSettings("moki")),
        ],
    )
    def test_unequal_settings_get_different_keys(self, a, b) -> None:
        assert a != b
        assert settings_key(a) != settings_key(b)

    @pytest.mark.unit
    def test_non_string_mapping_keys_are_invalid(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="strings"):
            settings_key({1: "a"})
        assert canonical_settings({"1": "a"})

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_numbers_are_invalid(self, value) -> None:
        with pytest.raises(InvalidConfigurationError):
            settings_key({"x": value})
