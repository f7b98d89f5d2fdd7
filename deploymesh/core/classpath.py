"""
Resolution of class resources through the defining module's import spec.

A Python class is shipped as the source file of the module that defines it.
The resource id is the module path with ``.`` replaced by ``/`` plus the
``.py`` suffix, e.g. ``mypkg.jobs.WordCount`` -> ``mypkg/jobs.py``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".py"

ClassResourceLookup = Callable[[type, str], Optional[str]]


def class_resource_id(clazz: type) -> str:
    """Derive the resource id of the module that defines ``clazz``."""
    module_name = clazz.__module__
    base = module_name.replace(".", "/")
    spec = getattr(sys.modules.get(module_name), "__spec__", None)
    if spec is not None and spec.submodule_search_locations is not None:
        # classes defined in a package's __init__
        base = f"{base}/__init__"
    return base + SOURCE_SUFFIX


def find_class_resource(clazz: type, resource_id: str) -> Optional[str]:
    """
    Look up ``resource_id`` through the import spec of the class's module.

    Returns the ``file://`` URI of the module source, or ``None`` when the
    module has no on-disk origin (builtins, ``__main__`` run from stdin,
    zipimports) or the origin does not correspond to ``resource_id``.
    """
    module = sys.modules.get(clazz.__module__)
    spec = getattr(module, "__spec__", None)
    if spec is None or not spec.has_location or not spec.origin:
        logger.debug("Module %s of %r has no file location", clazz.__module__, clazz)
        return None

    origin = Path(spec.origin)
    posix = origin.as_posix()
    if not origin.is_file() or not (posix == resource_id or posix.endswith("/" + resource_id)):
        logger.debug("Origin %s does not match resource id %s", origin, resource_id)
        return None
    return origin.resolve().as_uri()


__all__ = [
    "ClassResourceLookup",
    "SOURCE_SUFFIX",
    "class_resource_id",
    "find_class_resource",
]
