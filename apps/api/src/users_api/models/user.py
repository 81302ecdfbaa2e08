"""Response bodies of the user routes other than the record itself."""

from pydantic import BaseModel, Field


class DeleteUserResponse(BaseModel):
    """Confirmation returned by DELETE /users/{user_id}."""

    message: str = Field("User deleted successfully", description="Confirmation message")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str = Field(..., description="Human-readable error message")
