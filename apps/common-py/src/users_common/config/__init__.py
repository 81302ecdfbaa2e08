"""Configuration package."""

from users_common.config.store_config import StoreConfig, get_store_config

__all__ = ["StoreConfig", "get_store_config"]
