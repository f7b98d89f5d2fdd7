"""
Per-job registry of resources to deploy.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePosixPath
from typing import Dict, Iterator, List, Mapping, Optional
from urllib.parse import unquote, urlsplit

from deploymesh.core.entities.resource_config import Location, ResourceConfig, canonical_location
from deploymesh.core.entities.resource_type import ResourceType

logger = logging.getLogger(__name__)


def _default_id(location: Location) -> str:
    """Last path segment of the canonical location."""
    if isinstance(location, os.PathLike):
        location = os.fspath(location)
    if not isinstance(location, str) or not location.strip():
        # left for ResourceConfig to reject
        return ""
    name = PurePosixPath(unquote(urlsplit(canonical_location(location)).path)).name
    if not name:
        raise ValueError(f"Cannot derive an id from location '{location}', pass an explicit id")
    return name


class JobResources:
    """
    Ordered collection of :class:`ResourceConfig` keyed by resource id.

    Typical usage::

        resources = JobResources()
        resources.add_class(WordCount)
        resources.attach_file("data/words.txt", id="words")
    """

    def __init__(self) -> None:
        self._configs: Dict[str, ResourceConfig] = {}

    def add(self, config: ResourceConfig) -> ResourceConfig:
        if not isinstance(config, ResourceConfig):
            raise TypeError(f"Expected ResourceConfig, got {type(config).__name__}")
        if config.id in self._configs:
            raise ValueError(f"Resource with id '{config.id}' already exists")
        self._configs[config.id] = config
        logger.debug("Registered %s resource '%s' at %s", config.resource_type.value, config.id, config.location)
        return config

    # ------------------------------------------------------------------
    # Code resources

    def add_class(self, *classes: type) -> "JobResources":
        """Adds the given classes to the job's classpath."""
        for clazz in classes:
            config = ResourceConfig.from_class(clazz)
            if self._configs.get(config.id) == config:
                # classes sharing a module ship the same source file
                logger.debug("Class %r already covered by '%s'", clazz, config.id)
                continue
            self.add(config)
        return self

    def add_jar(self, location: Location, id: Optional[str] = None) -> ResourceConfig:
        """Adds a code archive; ``id`` defaults to the archive file name."""
        return self._add_named(location, id, ResourceType.JAR)

    def add_jars_in_zip(self, location: Location, id: Optional[str] = None) -> ResourceConfig:
        """Adds a zip whose members are code archives."""
        return self._add_named(location, id, ResourceType.JARS_IN_ZIP)

    # ------------------------------------------------------------------
    # Attachments

    def attach_file(self, location: Location, id: Optional[str] = None) -> ResourceConfig:
        config = self._named(location, id, ResourceType.FILE)
        path = config.local_path()
        if path is not None and not path.is_file():
            raise ValueError(f"Not an existing, readable file: {path}")
        return self.add(config)

    def attach_directory(self, location: Location, id: Optional[str] = None) -> ResourceConfig:
        config = self._named(location, id, ResourceType.DIRECTORY)
        path = config.local_path()
        if path is not None and not path.is_dir():
            raise ValueError(f"Not an existing, readable directory: {path}")
        return self.add(config)

    def attach_all(self, files: Mapping[str, Location]) -> "JobResources":
        """Attaches every ``id -> location`` file in ``files``."""
        for resource_id, location in files.items():
            self.attach_file(location, resource_id)
        return self

    @staticmethod
    def _named(location: Location, id: Optional[str], resource_type: ResourceType) -> ResourceConfig:
        return ResourceConfig(location, id if id is not None else _default_id(location), resource_type)

    def _add_named(self, location: Location, id: Optional[str], resource_type: ResourceType) -> ResourceConfig:
        return self.add(self._named(location, id, resource_type))

    # ------------------------------------------------------------------
    # Queries

    def get(self, resource_id: str) -> Optional[ResourceConfig]:
        return self._configs.get(resource_id)

    def list_configs(self) -> List[ResourceConfig]:
        return list(self._configs.values())

    def by_type(self, resource_type: ResourceType) -> List[ResourceConfig]:
        kind = ResourceType.parse(resource_type)
        return [config for config in self._configs.values() if config.resource_type is kind]

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {resource_id: config.to_dict() for resource_id, config in self._configs.items()}

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._configs

    def __iter__(self) -> Iterator[ResourceConfig]:
        return iter(list(self._configs.values()))

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"JobResources({', '.join(self._configs)})"
