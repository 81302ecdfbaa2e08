"""Tests for store configuration."""

from pathlib import Path

import pytest
from users_common.config import get_store_config


@pytest.mark.unit
def test_default_users_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USERS_FILE", raising=False)

    assert get_store_config().users_path == Path("users.json")


@pytest.mark.unit
def test_users_file_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("USERS_FILE", str(tmp_path / "people.json"))

    assert get_store_config().users_path == tmp_path / "people.json"
