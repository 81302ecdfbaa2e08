"""Common models package."""

from users_common.models.user import User, UserPayload

__all__ = ["User", "UserPayload"]
