"""Workflow for loading a stats job from a YAML file.

A job file names the settings, sample size, analyzer chains, and the import
paths of the generator and (optionally) the graph loader:

    settings: {difficulty: moki, goals: [trees]}
    sample_size: 100
    generator: my_seedgen.api:generate
    graph: my_seedgen.api:load_graph
    analyzers:
      - [spawn]
      - [spawn, {name: item-zone, item: Launch}]
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from seedstats.components.analyzers.registry_comp import build_chain
from seedstats.components.seeds.seed_corpus_comp import as_generator
from seedstats.helpers.dto.stats_dto import StatsArgs, StatsJob
from seedstats.helpers.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("settings", "sample_size", "generator", "analyzers")


def resolve_import_path(path: str) -> Any:
    """
    Import 'package.module:attribute' (dotted attributes allowed after the colon).

    Raises:
        InvalidConfigurationError: If the module or attribute cannot be found
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidConfigurationError(f"Import path must look like 'module:attribute', got '{path}'")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidConfigurationError(f"Cannot import module '{module_name}': {e}") from e
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise InvalidConfigurationError(f"'{module_name}' has no attribute '{attr_path}'") from e
    return target


def _optional_int(doc: Mapping[str, Any], key: str) -> int | None:
    value = doc.get(key)
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfigurationError(f"'{key}' must be an integer, got {value!r}")
    return value


def parse_job(doc: Any, source: str | None = None) -> StatsJob:
    """Build a StatsJob from an already-parsed YAML document."""
    if not isinstance(doc, Mapping):
        where = f" {source}" if source else ""
        raise InvalidConfigurationError(f"Job file{where} must contain a mapping")
    missing = [key for key in REQUIRED_FIELDS if key not in doc]
    if missing:
        raise InvalidConfigurationError(f"Job is missing required fields: {', '.join(missing)}")

    sample_size = _optional_int(doc, "sample_size")
    if sample_size is None:
        raise InvalidConfigurationError("'sample_size' must be an integer")

    chain_specs = doc["analyzers"]
    if not isinstance(chain_specs, list) or not chain_specs:
        raise InvalidConfigurationError("'analyzers' must be a non-empty list of chains")
    chains = [build_chain(spec) for spec in chain_specs]

    generator = as_generator(resolve_import_path(str(doc["generator"])))

    graph = None
    if doc.get("graph"):
        graph = resolve_import_path(str(doc["graph"]))
        if callable(graph):
            logger.info(f"[job] Loading graph from {doc['graph']}")
            graph = graph()

    args = StatsArgs(
        settings=doc["settings"],
        sample_size=sample_size,
        analyzers=chains,
        graph=graph,
        tolerated_errors=_optional_int(doc, "tolerated_errors"),
        error_message_limit=_optional_int(doc, "error_message_limit"),
        overwrite_seed_storage=bool(doc.get("overwrite_seed_storage", False)),
    )
    return StatsJob(args=args, generator=generator, source=source)


def load_job_workflow(path: str | Path) -> StatsJob:
    """
    Load and resolve a stats job file.

    Raises:
        InvalidConfigurationError: Unreadable file, malformed YAML, unknown
            analyzers or unresolvable import paths
    """
    job_path = Path(path)
    try:
        with open(job_path, encoding="utf-8") as f:
            doc = yaml.safe_load(f)
    except OSError as e:
        raise InvalidConfigurationError(f"Cannot read job file {job_path}: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Invalid YAML in {job_path}: {e}") from e

    logger.debug(f"[job] Loaded {job_path}")
    return parse_job(doc, source=str(job_path))
