"""Shared fixtures for edgebeam tests."""

import logging

import pytest
import structlog


@pytest.fixture
def restore_root_logger():
    """Undo handler and structlog changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
