"""Package-wide logging for matrixpath.

Every module asks `get_logger(__name__)` for its logger. All of them hang off
the ``matrixpath`` logger, which owns the only handler and the effective level.
The handler writes to stderr; stdout carries the JSON printed by the CLI.

Parsers log at DEBUG only (element counts, rejected input), so nothing is
printed unless the level is lowered with `enable_debug_logging` or
``matrixpath --verbose``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "matrixpath"

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package logger has its handler; cleared by reset_logging()
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a handler to the ``matrixpath`` logger.

    Only the first call has an effect; later calls return immediately so that
    importing several modules never stacks handlers. Call `reset_logging`
    first to install a different handler or format.

    Args:
        level: Level for the package logger.
        format_string: `logging.Formatter` format; a timestamped
            ``name - level - message`` line by default.
        handler: Handler to install; a stderr stream handler by default.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the process root logger
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger if needed.

    The returned logger has no level or handler of its own and defers to
    ``matrixpath``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the package logger and of its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show parser DEBUG records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the default INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so the next setup starts fresh."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
