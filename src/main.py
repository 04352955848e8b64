"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request, Response
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from src.api import api_router
from src.config import get_settings
from src.constants import APP_VERSION, NO_CACHE_HEADERS
from src.models.schemas import HealthResponse
from src.state import AppState, get_app_state
from src.utils.http_client import close_all_clients
from src.utils.logging import setup_logging
from src.web import web_router

settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


class NoCacheStaticMiddleware(BaseHTTPMiddleware):
    """Disable browser caching of static assets."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        if request.url.path.startswith("/static/"):
            response.headers.update(NO_CACHE_HEADERS)
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info("-------------------------")
    logger.info(f"{settings.app_name} v{APP_VERSION} starting")
    logger.info("-------------------------")

    config = await get_app_state().reload_config()
    if config is None or not config.is_complete:
        logger.info("No complete Jellyfin configuration, setup required")
    else:
        logger.info(f"Using Jellyfin server {config.jellyfin_url} as {config.user_name or config.user_id}")

    yield

    # Close persistent HTTP clients
    await close_all_clients()
    logger.info("HTTP clients closed")

    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.app_name,
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(NoCacheStaticMiddleware)

# Static files
app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

# Routers
app.include_router(api_router)
app.include_router(web_router)


@app.get("/health", include_in_schema=True, tags=["monitoring"], response_model=HealthResponse)
async def health_check(
    state: Annotated[AppState, Depends(get_app_state)],
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        Service status, setup completeness and cached library count.
    """
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        configured=state.config.is_complete,
        libraries=len(state.libraries),
    )
