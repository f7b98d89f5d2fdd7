"""Logging setup shared by the DeployMesh CLI and submission scripts."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union


PACKAGE_LOGGER_NAME = "deploymesh"
_HANDLER_MARKER = "_deploymesh_handler"


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    include_timestamp: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Route ``deploymesh.*`` records to ``stream`` (stdout by default).

    Calling it again reconfigures the handler installed earlier instead of
    stacking another one.
    """
    numeric_level = _coerce_level(level)
    fmt = "[%(levelname)s] %(name)s: %(message)s"
    if include_timestamp:
        fmt = "%(asctime)s " + fmt
    formatter = logging.Formatter(fmt, datefmt="%H:%M:%S")

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handler = next((h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)), None)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stdout)
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)
    logger.setLevel(numeric_level)
    return logger


def demote_ray_logging(level: int = logging.ERROR) -> None:
    """Quiet Ray's own loggers while building runtime environments."""
    for name in ("ray", "ray.runtime_env"):
        logging.getLogger(name).setLevel(level)
