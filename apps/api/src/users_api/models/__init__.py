"""API response models."""

from users_api.models.health import HealthCheckResponse
from users_api.models.user import DeleteUserResponse, ErrorResponse

__all__ = ["DeleteUserResponse", "ErrorResponse", "HealthCheckResponse"]
