"""
Stable cache keys for opaque settings values.

Two settings values that compare equal must map to the same key, and values
that compare unequal must not. Settings are first reduced to a canonical form:

- numbers compare by value (True == 1 == 1.0), so whole floats and bools
  become ints
- every container is tagged with its kind, so a list never matches a tuple
  and a dataclass never matches a dict with the same fields
- mapping keys must be strings; {1: "a"} and {"1": "a"} would otherwise
  serialize identically

The canonical form is serialized as compact JSON and hashed.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
import math
from collections.abc import Mapping
from typing import Any

from seedstats.helpers.exceptions import InvalidConfigurationError


def _canonical_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), allow_nan=False)


def _canonical_form(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"non-finite number {value!r}")
        return int(value) if value.is_integer() else value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        kind = f"dataclass:{type(value).__module__}.{type(value).__qualname__}"
        fields = {f.name: _canonical_form(getattr(value, f.name)) for f in dataclasses.fields(value)}
        return [kind, fields]
    if isinstance(value, Mapping):
        items = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"mapping keys must be strings, got {key!r}")
            items[key] = _canonical_form(item)
        return ["dict", items]
    if isinstance(value, list):
        return ["list", [_canonical_form(item) for item in value]]
    if isinstance(value, tuple):
        return ["tuple", [_canonical_form(item) for item in value]]
    if isinstance(value, (set, frozenset)):
        return ["set", sorted((_canonical_form(item) for item in value), key=_canonical_json)]
    raise TypeError(f"Object of type {type(value).__name__} is not supported")


def canonical_settings(settings: Any) -> str:
    """
    Serialize settings to their canonical JSON form (the input of settings_key).

    Raises:
        InvalidConfigurationError: If the settings cannot be serialized
    """
    try:
        return _canonical_json(_canonical_form(settings))
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Settings cannot be used as a cache key: {e}") from e


def _describe(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


def describe_settings(settings: Any) -> str:
    """Human-readable JSON of the settings, written next to cached seeds."""
    try:
        return json.dumps(settings, sort_keys=True, indent=2, default=_describe)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Settings cannot be described: {e}") from e


def settings_key(settings: Any) -> str:
    """Short hex digest identifying a settings value (e.g. '3f2a9c0d1b7e4a55')."""
    digest = hashlib.sha256(canonical_settings(settings).encode("utf-8")).hexdigest()
    return digest[:16]
