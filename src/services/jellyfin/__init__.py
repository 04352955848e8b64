"""Jellyfin integration module.

Provides the API client and movie library discovery.

Usage:
    from src.services.jellyfin import JellyfinClient, discover_libraries

    client = JellyfinClient(
        server_url="http://jellyfin.local:8096",
        api_key="your-api-key",
        user_id="user-guid"
    )

    libraries = await discover_libraries(client)
    movies = await client.list_movies(libraries[0].id)
"""

from src.services.jellyfin.client import (
    JellyfinAuthError,
    JellyfinClient,
    JellyfinConnectionError,
    JellyfinError,
    JellyfinResponseError,
    create_jellyfin_client,
)
from src.services.jellyfin.libraries import classify_libraries, discover_libraries
from src.services.jellyfin.schemas import (
    ItemsResponse,
    JellyfinUser,
    MediaFolder,
    MediaFoldersResponse,
    Movie,
)

__all__ = [
    # Client
    "JellyfinClient",
    "JellyfinError",
    "JellyfinAuthError",
    "JellyfinConnectionError",
    "JellyfinResponseError",
    "create_jellyfin_client",
    # Schemas
    "ItemsResponse",
    "JellyfinUser",
    "MediaFolder",
    "MediaFoldersResponse",
    "Movie",
    # Libraries
    "classify_libraries",
    "discover_libraries",
]
