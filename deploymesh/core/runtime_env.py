"""
Translation of job resources into a Ray ``runtime_env``.

Code-bearing resources become ``py_modules`` entries; attachments are
published to workers as a JSON ``id -> location`` mapping in the
``DEPLOYMESH_ATTACHMENTS`` environment variable.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List

from ray.runtime_env import RuntimeEnv

from deploymesh.core.entities.resource_config import ResourceConfig
from deploymesh.core.entities.resource_type import ResourceType

logger = logging.getLogger(__name__)

ATTACHMENTS_ENV_VAR = "DEPLOYMESH_ATTACHMENTS"


def _package_root(config: ResourceConfig) -> str:
    path = config.local_path()
    if path is None:
        raise ValueError(f"Class resource '{config.id}' must be a local file, got {config.location}")
    if not path.as_posix().endswith("/" + config.id):
        raise ValueError(f"Class resource '{config.id}' location {path} does not end with its id")
    parts = config.id.split("/")
    if len(parts) < 2:
        raise ValueError(
            f"Class resource '{config.id}' lives in a top-level module and cannot be shipped as a package"
        )
    return str(path.parents[len(parts) - 2])


def _archive_location(config: ResourceConfig) -> str:
    path = config.local_path()
    return str(path) if path is not None else config.canonical_location


def build_runtime_env(resources: Iterable[ResourceConfig]) -> Dict[str, Any]:
    """Build a plain ``runtime_env`` dict for ``resources``."""
    py_modules: List[str] = []
    attachments: Dict[str, str] = {}

    for config in resources:
        if config.resource_type is ResourceType.CLASS:
            entry = _package_root(config)
        elif config.resource_type is ResourceType.JAR:
            entry = _archive_location(config)
        else:
            attachments[config.id] = config.canonical_location
            continue
        if entry not in py_modules:
            py_modules.append(entry)

    runtime_env: Dict[str, Any] = {}
    if py_modules:
        runtime_env["py_modules"] = py_modules
    if attachments:
        runtime_env["env_vars"] = {ATTACHMENTS_ENV_VAR: json.dumps(attachments, sort_keys=True)}
    logger.debug("runtime_env: %d py_modules, %d attachments", len(py_modules), len(attachments))
    return runtime_env


def to_ray_runtime_env(resources: Iterable[ResourceConfig]) -> RuntimeEnv:
    """Same as :func:`build_runtime_env`, validated by Ray."""
    return RuntimeEnv(**build_runtime_env(resources))


__all__ = [
    "ATTACHMENTS_ENV_VAR",
    "build_runtime_env",
    "to_ray_runtime_env",
]
