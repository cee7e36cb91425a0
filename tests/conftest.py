"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_knitsphere_logger():
    """Undo configure_logging() so caplog sees records in every test."""
    yield
    app_logger = logging.getLogger("knitsphere")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True
