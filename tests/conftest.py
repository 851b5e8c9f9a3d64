# tests/conftest.py
from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by configure_logging so they do not outlive the test's capture streams."""
    yield
    logger = logging.getLogger("qif_csv")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
