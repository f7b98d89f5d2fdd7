"""
Descriptor of a single resource deployed to the cluster.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

from deploymesh.core.classpath import ClassResourceLookup, class_resource_id, find_class_resource
from deploymesh.core.entities.resource_type import ResourceType

Location = Union[str, "os.PathLike[str]"]


def canonical_location(location: Location) -> str:
    """
    Return the canonical string form of a location.

    URLs (anything with a scheme) are kept verbatim; filesystem paths become
    the absolute ``file://`` URI of the path.
    """
    if isinstance(location, os.PathLike):
        raw = os.fspath(location)
    else:
        raw = location
        # single-letter schemes are Windows drive letters
        if len(urlsplit(raw).scheme) > 1:
            return raw
    return Path(os.path.abspath(os.path.expanduser(raw))).as_uri()


@dataclass(frozen=True)
class ResourceConfig:
    """
    Describes a single resource to deploy to the cluster.

    Attributes:
        location: Where the resource bytes can be read from. Resolved on the
            local machine during job submission.
        id: Key under which the resource is stored in the cluster.
        resource_type: Kind of the resource.
    """

    location: Location = field(compare=False)
    id: str
    resource_type: ResourceType
    _canonical_location: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.location is None:
            raise ValueError("location must not be None")
        if not isinstance(self.location, (str, os.PathLike)) or not isinstance(os.fspath(self.location), str):
            raise TypeError(f"location must be a string or path, got {type(self.location).__name__}")
        if not os.fspath(self.location).strip():
            raise ValueError("location must not be empty")
        if self.resource_type is None:
            raise ValueError("resource_type must not be None")
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("id cannot be None or empty")

        object.__setattr__(self, "resource_type", ResourceType.parse(self.resource_type))
        object.__setattr__(self, "_canonical_location", canonical_location(self.location))

    @classmethod
    def from_class(cls, clazz: type, *, lookup: Optional[ClassResourceLookup] = None) -> "ResourceConfig":
        """
        Creates a config for a class to be deployed, deriving id and location.

        Args:
            clazz: The class to deploy.
            lookup: Optional ``(clazz, resource_id) -> location`` hook that
                replaces resolution through the module's import spec.

        Raises:
            ValueError: if ``clazz`` is None/not a class or no location can be
                derived for it.
        """
        if clazz is None:
            raise ValueError("clazz must not be None")
        if not inspect.isclass(clazz):
            raise ValueError(f"clazz must be a class, got {clazz!r}")

        resource_id = class_resource_id(clazz)
        location = (lookup or find_class_resource)(clazz, resource_id)
        if location is None:
            raise ValueError(f"Couldn't derive location from class {clazz!r}")
        return cls(location, resource_id, ResourceType.CLASS)

    @property
    def canonical_location(self) -> str:
        return self._canonical_location

    def local_path(self) -> Optional[Path]:
        """Filesystem path of the resource, or ``None`` for remote locations."""
        parts = urlsplit(self._canonical_location)
        if parts.scheme != "file":
            return None
        return Path(url2pathname(parts.path))

    def to_dict(self) -> Dict[str, str]:
        """Serialize the descriptor for transport."""
        return {
            "location": os.fspath(self.location),
            "id": self.id,
            "type": self.resource_type.value,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ResourceConfig":
        return cls(
            location=payload.get("location"),
            id=payload.get("id"),
            resource_type=payload.get("type"),
        )
