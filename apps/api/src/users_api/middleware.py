"""CORS setup for browser clients of the user registry."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

# Methods served under /users, plus the preflight
USER_ROUTE_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")

LOCAL_ENVIRONMENTS = frozenset({"development", "dev", "local"})
LOCAL_ORIGINS: tuple[str, ...] = ("http://localhost:3000", "http://127.0.0.1:3000")


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Origins allowed to call the API from a browser.

    ``ui_url`` is always allowed; the localhost origins only in local
    environments.
    """
    origins = [ui_url.rstrip("/")] if ui_url else []
    if environment.lower() in LOCAL_ENVIRONMENTS:
        origins.extend(LOCAL_ORIGINS)
    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """CORS headers for responses built outside the middleware, e.g. 500 errors.

    Returns:
        Headers echoing ``origin``, or an empty dict when it is not allowed
    """
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ", ".join(USER_ROUTE_METHODS),
        "Vary": "Origin",
    }


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Install CORS for the user routes."""
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=list(USER_ROUTE_METHODS),
        allow_headers=["Content-Type"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
