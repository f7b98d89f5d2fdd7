"""
Domain entities describing deployable resources.
"""

from .resource_config import ResourceConfig, canonical_location  # noqa: F401
from .resource_type import ResourceType  # noqa: F401

__all__ = [
    "ResourceConfig",
    "ResourceType",
    "canonical_location",
]
