"""Logging setup shared by all uritpl modules.

Every module logs through a child of the ``uritpl`` logger. Output goes to
stderr so that expansions printed by the command line tool stay pipeable.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "uritpl"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``uritpl`` logger.

    Repeated calls are no-ops until ``reset_logging`` runs.

    Args:
        level: Initial level (default: WARNING, so parser debug output is quiet).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stderr stream handler.
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger below ``uritpl`` that inherits its level and handler.

    Args:
        name: Logger name, usually ``__name__``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``uritpl`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log parser and expander details."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to the default WARNING level."""
    set_global_log_level(logging.WARNING)


def reset_logging() -> None:
    """Drop the installed handler so the next call reconfigures (for tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
