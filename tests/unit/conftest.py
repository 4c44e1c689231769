"""Conftest for unit tests - unit marker plus shared storage fixtures."""

import pytest

from tt_calendar_sync.adapters.file_storage import InMemoryFileStorage


def pytest_collection_modifyitems(config, items):
    """Automatically mark all tests in the unit directory as unit tests."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def storage() -> InMemoryFileStorage:
    """Fresh in-memory storage that counts physical reads and writes."""
    return InMemoryFileStorage()
