"""
Core package for DeployMesh resource descriptors.

Re-exports the primary types so callers can simply do::

    from deploymesh.core import JobResources, ResourceConfig
"""

from __future__ import annotations

from deploymesh.core.entities import ResourceConfig, ResourceType
from deploymesh.core.registry import JobResources

__all__ = ["JobResources", "ResourceConfig", "ResourceType"]
