"""Template context helpers."""

from typing import Any

from fastapi import Request

from src.config import get_settings
from src.models.config import JellyfinConfig


def get_base_context(request: Request, config: JellyfinConfig | None = None) -> dict[str, Any]:
    """Get base context for all templates."""
    settings = get_settings()

    path = request.url.path
    if path == "/":
        current_page = "index"
    elif path.startswith("/setup"):
        current_page = "setup"
    else:
        current_page = None

    return {
        "request": request,
        "app_name": settings.app_name,
        "config": config,
        "current_page": current_page,
    }
