"""
Resource categories understood by the deployment runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class ResourceType(str, Enum):
    """
    Closed set of resource kinds shipped to worker nodes.

    Using ``str`` as a mixin keeps the members YAML/JSON-serialisable.
    """

    CLASS = "class"
    FILE = "file"
    DIRECTORY = "directory"
    JAR = "jar"
    JARS_IN_ZIP = "jars_in_zip"

    def is_code(self) -> bool:
        """Whether resources of this kind carry importable code."""
        return self in _CODE_TYPES

    @classmethod
    def parse(cls, value: Union[str, "ResourceType"]) -> "ResourceType":
        """
        Resolve a member, its name or its value (case-insensitive).

        Raises:
            ValueError: if ``value`` does not name a resource type.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported resource type: {value!r}")
        raw = value.strip().lower().replace("-", "_")
        for member in cls:
            if raw == member.value:
                return member
        raise ValueError(
            f"Unknown resource type '{value}'. Expected one of: {', '.join(m.value for m in cls)}"
        )


_CODE_TYPES = frozenset({ResourceType.CLASS, ResourceType.JAR, ResourceType.JARS_IN_ZIP})
