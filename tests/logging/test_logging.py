"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from uritpl import Template
from uritpl.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_default_level_hides_parser_debug() -> None:
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    Template("{x}")
    assert capture.getvalue() == ""


def test_enable_debug_shows_parse_summary() -> None:
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    enable_debug_logging()
    Template("a{x}")
    assert "2 component(s)" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    Template("a{x}")
    assert capture.getvalue() == ""


def test_disable_debug_restores_default_level() -> None:
    """Disabling debug returns to the WARNING default, so INFO stays quiet."""
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    default_level = logging.getLogger(ROOT_LOGGER_NAME).level
    enable_debug_logging()
    disable_debug_logging()
    assert logging.getLogger(ROOT_LOGGER_NAME).level == default_level == logging.WARNING
    get_logger("uritpl.test").info("info-after-disable")
    assert "info-after-disable" not in capture.getvalue()


def test_child_loggers_inherit_level() -> None:
    logger = get_logger("uritpl.dsl.parser")
    assert logger.level == logging.NOTSET
    set_global_log_level(logging.ERROR)
    assert logger.getEffectiveLevel() == logging.ERROR


def test_setup_is_idempotent() -> None:
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_ignored_binding_logged_at_debug(caplog) -> None:
    enable_debug_logging()
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        assert Template("{x}").expand(x=object()) == ""
    assert "unsupported shape object" in caplog.text


def test_custom_format() -> None:
    capture = StringIO()
    setup_root_logger(format_string="%(levelname)s:%(message)s",
                      handler=logging.StreamHandler(capture))
    get_logger("uritpl.test").warning("hello")
    assert capture.getvalue().strip() == "WARNING:hello"
