"""Service initialization and dependency injection."""

import logging

from fastapi import Depends
from users_common.config import StoreConfig, get_store_config
from users_common.services.user_service import UserService
from users_common.services.user_store import JsonFileUserStore

logger = logging.getLogger(__name__)

# Service instances cache, keyed by backing file
_services_cache: dict[str, UserService] = {}


def get_user_service(config: StoreConfig = Depends(get_store_config)) -> UserService:
    """Get the file-backed user service instance.

    Args:
        config: Store configuration

    Returns:
        UserService bound to the configured users file
    """
    key = str(config.users_path)
    if key not in _services_cache:
        _services_cache[key] = UserService(store=JsonFileUserStore(config.users_path))
        logger.info("Initialized UserService with store %s", key)

    return _services_cache[key]
