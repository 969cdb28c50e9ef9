"""Unit-test fixtures."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Undo handlers and structlog config installed by CLI invocations."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler and handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
