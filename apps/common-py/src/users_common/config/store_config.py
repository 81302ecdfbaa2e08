"""Configuration for the user record store."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the common-py project directory (apps/common-py/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/common-py/src/users_common/config/store_config.py
    current_file = Path(__file__)
    common_py_dir = current_file.parent.parent.parent.parent
    return str(common_py_dir / ".env")


class StoreConfig(BaseSettings):
    """Store settings from environment variables."""

    # Relative paths resolve against the working directory
    users_file: str = "users.json"

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
    )

    @property
    def users_path(self) -> Path:
        """Backing file path."""
        return Path(self.users_file)


def get_store_config() -> StoreConfig:
    """Get store configuration.

    Returns:
        StoreConfig instance
    """
    return StoreConfig()
