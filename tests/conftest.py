"""Global pytest configuration.

The CLI sets the package log level globally; restore it after every test so
that level changes do not leak into unrelated tests.
"""

from __future__ import annotations

import logging

import pytest

from matrixpath.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_log_level():
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = root_logger.level
    handler_levels = [(h, h.level) for h in root_logger.handlers]
    yield
    root_logger.setLevel(level)
    for handler, handler_level in handler_levels:
        handler.setLevel(handler_level)
