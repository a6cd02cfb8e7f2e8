"""Global pytest configuration."""

from __future__ import annotations

import pytest

from uritpl.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _default_logging():
    """Start every test from the default logging setup."""
    reset_logging()
    setup_root_logger()
    yield
