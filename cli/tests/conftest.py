"""Fixtures shared by the command-line tool tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore the handlers and level of the root logger after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
