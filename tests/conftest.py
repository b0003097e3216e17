"""Shared fixtures for the Playground tests."""

import io
import os

# Qt must not need a display; set before anything imports PySide6
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
import structlog

from playground import log


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_output():
    """Route log lines into a buffer at DEBUG level."""
    buffer = io.StringIO()
    log.configure(level="DEBUG", stream=buffer)
    return buffer
