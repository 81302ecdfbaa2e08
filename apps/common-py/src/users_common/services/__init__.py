"""Common services package."""

from users_common.services.user_service import UserService, generate_user_id
from users_common.services.user_store import JsonFileUserStore, UserStore
from users_common.services.user_validator import describe_error, first_violation, validate

__all__ = [
    "JsonFileUserStore",
    "UserService",
    "UserStore",
    "describe_error",
    "first_violation",
    "generate_user_id",
    "validate",
]
