"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from users_api.config import get_settings
from users_api.errors import register_exception_handlers
from users_api.middleware import setup_middleware
from users_api.routes import api_router
from users_common.config import get_store_config

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Users file: {get_store_config().users_path.resolve()}")
    logger.info(f"Server is running on port {settings.api_port}")

    yield

    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    """Build the application with middleware, error handlers and routes."""
    app = FastAPI(
        title=settings.app_name,
        description="User registry backed by a JSON file",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)
    register_exception_handlers(app, ui_url=settings.ui_url, environment=settings.environment)
    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run(
        "users_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
