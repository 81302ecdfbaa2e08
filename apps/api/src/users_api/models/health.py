"""Health check response model."""

from pydantic import BaseModel, ConfigDict, Field


class HealthCheckResponse(BaseModel):
    """Liveness report for the user registry."""

    status: str = Field(..., description="Always 'ok' while the process serves requests")
    version: str = Field(..., description="Application version from settings")
    environment: str | None = Field(None, description="Deployment environment name")
    message: str = "User registry is healthy"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "environment": "development",
                "message": "User registry is healthy",
            }
        }
    )
