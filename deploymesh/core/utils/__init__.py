"""Utility helpers for DeployMesh."""

from .logging import PACKAGE_LOGGER_NAME, configure_logging, demote_ray_logging  # noqa: F401

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "demote_ray_logging",
]
