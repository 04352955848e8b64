"""FastAPI dependencies shared by web and API routes."""

from collections.abc import Callable

from src.models.config import JellyfinConfig
from src.services.jellyfin.client import JellyfinClient, create_jellyfin_client
from src.state import AppState, get_app_state

ClientFactory = Callable[[JellyfinConfig], JellyfinClient]


def get_client_factory() -> ClientFactory:
    """Get the factory building Jellyfin clients from a configuration."""
    return create_jellyfin_client


__all__ = ["AppState", "ClientFactory", "get_app_state", "get_client_factory"]
