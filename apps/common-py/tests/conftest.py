"""Pytest configuration for common-py tests."""

from pathlib import Path

import pytest
from users_common.services.user_store import JsonFileUserStore


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external services")


@pytest.fixture
def store(tmp_path: Path) -> JsonFileUserStore:
    """Store backed by a file that does not exist yet."""
    return JsonFileUserStore(tmp_path / "users.json")
