"""Resource manifest loading for DeployMesh.

A manifest is a YAML file listing the resources a job ships to the cluster::

    resources:
      classes:
        - mypkg.jobs:WordCount
      entries:
        - type: file
          location: data/words.txt
          id: words

Manifest precedence:

1. An explicit path passed to :func:`get_manifest`.
2. Environment variable ``DEPLOYMESH_CONFIG`` pointing to a YAML file.
3. ``deploymesh.yaml`` in the current working directory.
4. Otherwise an empty manifest.
"""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union
from urllib.parse import urlsplit

import yaml

from deploymesh.core.entities.resource_config import ResourceConfig
from deploymesh.core.entities.resource_type import ResourceType
from deploymesh.core.registry import JobResources

__all__ = [
    "ResourceEntry",
    "ResourceManifest",
    "get_manifest",
    "import_class",
    "load_manifest",
    "reset_manifest",
]

logger = logging.getLogger(__name__)

_ENV_VAR = "DEPLOYMESH_CONFIG"
_CWD_FILE = "deploymesh.yaml"


@dataclass
class ResourceEntry:
    resource_type: ResourceType
    location: str
    id: Optional[str] = None


@dataclass
class ResourceManifest:
    classes: List[str] = field(default_factory=list)
    entries: List[ResourceEntry] = field(default_factory=list)
    base_dir: Optional[Path] = None
    source: Optional[Path] = None

    def _resolve_location(self, location: str) -> str:
        if len(urlsplit(location).scheme) > 1 or self.base_dir is None:
            return location
        path = Path(location).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return str(path)

    def build(self, resources: Optional[JobResources] = None) -> JobResources:
        """Materialise the manifest into a :class:`JobResources`."""
        resources = resources if resources is not None else JobResources()
        for import_path in self.classes:
            resources.add_class(import_class(import_path))

        for entry in self.entries:
            location = self._resolve_location(entry.location)
            if entry.resource_type is ResourceType.FILE:
                resources.attach_file(location, entry.id)
            elif entry.resource_type is ResourceType.DIRECTORY:
                resources.attach_directory(location, entry.id)
            elif entry.resource_type is ResourceType.JAR:
                resources.add_jar(location, entry.id)
            elif entry.resource_type is ResourceType.JARS_IN_ZIP:
                resources.add_jars_in_zip(location, entry.id)
            else:
                if not entry.id:
                    raise ValueError(f"Class entry at '{entry.location}' requires an explicit 'id'")
                resources.add(ResourceConfig(location, entry.id, ResourceType.CLASS))

        logger.info("Manifest %s built: %d resources", self.source or "<empty>", len(resources))
        return resources


_manifest: Optional[ResourceManifest] = None


def import_class(import_path: str) -> type:
    module_name, sep, attr = import_path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Invalid import path '{import_path}'. Expected format 'module:attr'.")
    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


def _resolve_manifest_path() -> Optional[Path]:
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate
        logger.warning("%s points to missing file %s, ignoring", _ENV_VAR, candidate)

    cwd_file = Path.cwd() / _CWD_FILE
    if cwd_file.is_file():
        return cwd_file
    return None


def _coerce_entry(raw: object) -> ResourceEntry:
    if not isinstance(raw, dict):
        raise ValueError("Each resource entry must be a mapping")
    location = str(raw.get("location") or "").strip()
    if not location:
        raise ValueError("Resource entry requires a non-empty 'location'")
    if "type" not in raw:
        raise ValueError(f"Resource entry '{location}' requires a 'type'")
    resource_id = raw.get("id")
    return ResourceEntry(
        resource_type=ResourceType.parse(raw["type"]),
        location=location,
        id=str(resource_id).strip() if resource_id is not None else None,
    )


def _build_manifest(data: Dict[str, object], path: Optional[Path]) -> ResourceManifest:
    node = data.get("resources", {}) or {}
    if not isinstance(node, dict):
        raise ValueError("'resources' section must be a mapping")

    raw_classes = node.get("classes", []) or []
    if not isinstance(raw_classes, list):
        raise ValueError("'classes' must be a list of 'module:attr' strings")
    raw_entries = node.get("entries", []) or []
    if not isinstance(raw_entries, list):
        raise ValueError("'entries' must be a list of mappings")

    return ResourceManifest(
        classes=[str(item).strip() for item in raw_classes],
        entries=[_coerce_entry(item) for item in raw_entries],
        base_dir=path.resolve().parent if path is not None else None,
        source=path,
    )


def load_manifest(path: Union[str, Path]) -> ResourceManifest:
    """Parse the manifest at ``path`` without touching the cache."""
    manifest_path = Path(path).expanduser()
    with manifest_path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed manifest {manifest_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Manifest {manifest_path} must contain a mapping")
    return _build_manifest(data, manifest_path)


def get_manifest(path: Union[str, Path, None] = None) -> ResourceManifest:
    global _manifest
    if path is not None:
        return load_manifest(path)
    if _manifest is None:
        resolved = _resolve_manifest_path()
        _manifest = load_manifest(resolved) if resolved is not None else ResourceManifest()
    return _manifest


def reset_manifest() -> None:
    """Reset cached manifest (intended for tests)."""
    global _manifest
    _manifest = None
