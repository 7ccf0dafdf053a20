"""Pytest fixtures for value_emitter tests."""

import pytest

from value_emitter import ValueEmitter


@pytest.fixture
def emitter():
    """Create a fresh emitter for testing."""
    e = ValueEmitter()
    yield e
    e.dispose()


@pytest.fixture
def log():
    """Shared list that listeners append to, for checking delivery order."""
    return []
