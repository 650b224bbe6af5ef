#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and env vars
#  - Caches composed config for performance
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from seedstats.components.seeds.error_budget_comp import (
    DEFAULT_ERROR_MESSAGE_LIMIT,
    DEFAULT_TOLERATED_ERRORS_FLOOR,
    DEFAULT_TOLERATED_ERRORS_RATIO,
)

ENV_PREFIX = "SEEDSTATS_"
CONFIG_PATH_ENV = "SEEDSTATS_CONFIG"


class ConfigService:
    """
    Service for loading and caching seedstats configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("seed_storage_dir")
            'seeds'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("[config] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def tolerated_errors_for(self, sample_size: int) -> int:
        """Default failure budget for a sample size: ratio of the sample, never below the floor."""
        floor = int(self.get("tolerated_errors_floor", DEFAULT_TOLERATED_ERRORS_FLOOR))
        ratio = float(self.get("tolerated_errors_ratio", DEFAULT_TOLERATED_ERRORS_RATIO))
        return max(floor, int(sample_size * ratio))

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/seedstats/config.yaml  (if present)
          3) ./config/config.yaml
          4) $SEEDSTATS_CONFIG (if set)
          5) overrides dict passed in
          6) Environment variables (SEEDSTATS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml("/etc/seedstats/config.yaml"))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("[config] compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Where generated seeds are cached, one directory per settings
            "seed_storage_dir": "seeds",
            # Where CSV reports are written
            "output_dir": "stats",
            # Failure budget when a job does not set tolerated_errors
            "tolerated_errors_floor": DEFAULT_TOLERATED_ERRORS_FLOOR,
            "tolerated_errors_ratio": DEFAULT_TOLERATED_ERRORS_RATIO,
            # Error messages shown after aborting
            "error_message_limit": DEFAULT_ERROR_MESSAGE_LIMIT,
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or not a mapping.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[config] Ignoring unreadable config {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[config] Ignoring {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          SEEDSTATS_SEED_STORAGE_DIR=/var/cache/seeds
          SEEDSTATS_TOLERATED_ERRORS_FLOOR=25
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == CONFIG_PATH_ENV:
                continue
            key = k[len(ENV_PREFIX) :].lower()
            if not key:
                continue
            cfg[key] = self._parse_env_value(v)

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        if value.isdigit():
            return int(value)
        try:
            return float(value)
        except ValueError:
            return value
