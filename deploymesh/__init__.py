"""
DeployMesh package.

Describes the resources (classes, files, directories and code archives) a
job ships to the worker nodes of a Ray cluster. Ray itself is imported
lazily so that the descriptors can be used without it.
"""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "JobResources",
    "ResourceConfig",
    "ResourceType",
    "build_runtime_env",
    "get_manifest",
    "to_ray_runtime_env",
    "__version__",
]


try:
    __version__ = version("deploymesh-core")
except PackageNotFoundError:
    __version__ = "0.0.0"


_LAZY_TARGETS = {
    "JobResources": ("deploymesh.core.registry", "JobResources"),
    "ResourceConfig": ("deploymesh.core.entities", "ResourceConfig"),
    "ResourceType": ("deploymesh.core.entities", "ResourceType"),
    "build_runtime_env": ("deploymesh.core.runtime_env", "build_runtime_env"),
    "get_manifest": ("deploymesh.core.config", "get_manifest"),
    "to_ray_runtime_env": ("deploymesh.core.runtime_env", "to_ray_runtime_env"),
}


def __getattr__(name: str):
    """Dynamically load public symbols to avoid importing Ray early."""
    target = _LAZY_TARGETS.get(name)
    if target is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

    module_name, attribute = target
    value = getattr(import_module(module_name), attribute)
    globals()[name] = value
    return value
