"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from users_api.main import app


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external services")


@pytest.fixture
def users_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the store at a file that does not exist yet."""
    path = tmp_path / "users.json"
    monkeypatch.setenv("USERS_FILE", str(path))
    return path


@pytest.fixture
def client(users_file: Path) -> TestClient:
    """Create a FastAPI test client bound to a fresh users file."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def read_users(users_file: Path):
    """Return the records currently on disk."""

    def _read() -> list[dict]:
        return json.loads(users_file.read_text(encoding="utf-8"))

    return _read
