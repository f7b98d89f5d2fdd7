"""
Tests for the package logging helpers.
"""

from __future__ import annotations

import io
import logging

import pytest

from deploymesh.core.utils import PACKAGE_LOGGER_NAME, configure_logging, demote_ray_logging


def _marked_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, "_deploymesh_handler", False)]


def test_configure_logging_is_idempotent():
    first = io.StringIO()
    second = io.StringIO()

    configure_logging("debug", stream=first)
    logger = configure_logging(logging.INFO, stream=second)

    assert logger.name == PACKAGE_LOGGER_NAME
    assert len(_marked_handlers(logger)) == 1
    logging.getLogger("deploymesh.core.registry").info("registered %s", "words")
    logging.getLogger("deploymesh.core.registry").debug("hidden")

    assert first.getvalue() == ""
    assert second.getvalue() == "[INFO] deploymesh.core.registry: registered words\n"


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")


def test_demote_ray_logging():
    ray_logger = logging.getLogger("ray")
    previous = ray_logger.level
    try:
        demote_ray_logging(logging.CRITICAL)
        assert ray_logger.level == logging.CRITICAL
    finally:
        ray_logger.setLevel(previous)
