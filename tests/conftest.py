"""
Shared pytest fixtures.
"""

from __future__ import annotations

import importlib
import logging
import sys
import uuid
from pathlib import Path

import pytest

from deploymesh.core.config import reset_manifest

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s", force=True)
logging.getLogger("deploymesh").setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def clear_manifest(monkeypatch):
    monkeypatch.delenv("DEPLOYMESH_CONFIG", raising=False)
    reset_manifest()
    yield
    reset_manifest()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers/levels installed by configure_logging() during a test."""
    logger = logging.getLogger("deploymesh")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def import_source(tmp_path: Path, monkeypatch):
    """
    Write ``source`` to a fresh importable module and return the module.

    ``package=True`` places it in ``<name>/__init__.py``; ``subpackage``
    nests it one level deeper as ``<name>/<subpackage>.py``.
    """
    created = []

    def _import(source: str, *, package: bool = False, subpackage: str = ""):
        name = f"dm_fixture_{uuid.uuid4().hex[:8]}"
        if package or subpackage:
            pkg_dir = tmp_path / name
            pkg_dir.mkdir()
            init_source = source if package else ""
            (pkg_dir / "__init__.py").write_text(init_source, encoding="utf-8")
            if subpackage:
                (pkg_dir / f"{subpackage}.py").write_text(source, encoding="utf-8")
                name = f"{name}.{subpackage}"
        else:
            (tmp_path / f"{name}.py").write_text(source, encoding="utf-8")

        monkeypatch.syspath_prepend(str(tmp_path))
        module = importlib.import_module(name)
        created.append(name)
        return module

    yield _import

    for name in created:
        top = name.split(".")[0]
        for key in [k for k in sys.modules if k == top or k.startswith(top + ".")]:
            sys.modules.pop(key, None)
