"""Centralized logging configuration for sgraph.

All modules obtain loggers through :func:`get_logger`; they hang below the
``sgraph`` root logger, which owns the single handler. Log records go to
stderr so that command output written to stdout stays machine-readable.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "sgraph"

# Set once the sgraph root logger carries its handler
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the ``sgraph`` root logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    # One handler only, even after a reset
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    # stderr keeps stdout free for layers and paths printed by the CLI
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # pytest's caplog hooks the global root logger
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of ``sgraph`` (typically called with ``__name__``).

    Child loggers carry no handlers of their own and inherit the root level.
    """
    # Configure lazily if the import-time setup was reset
    setup_root_logger()
    logger = logging.getLogger(name)
    # NOTSET defers to the sgraph root level
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``sgraph`` root logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    # Handlers filter too; keep them in step with the logger
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log per-layer and per-root decisions of the algorithms."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler so the next call reconfigures (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


# Library import configures the sgraph root logger once
setup_root_logger()
