"""Jellyfin API client.

Handles communication with the Jellyfin server: users, media folders and
movie listings.
Documentation: https://api.jellyfin.org/
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from src.config import get_settings
from src.constants import (
    API_TIMEOUT_EXTERNAL,
    JELLYFIN_AUTH_HEADER,
    JELLYFIN_ITEM_TYPE_MOVIE,
    JELLYFIN_MOVIE_FIELDS,
    MAX_MOVIES_PER_LIBRARY,
)
from src.models.config import JellyfinConfig
from src.services.jellyfin.schemas import (
    ItemsResponse,
    JellyfinUser,
    MediaFolder,
    MediaFoldersResponse,
    Movie,
)
from src.utils.http_client import get_jellyfin_http_client

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(list[JellyfinUser])


class JellyfinError(Exception):
    """Base exception for Jellyfin errors (server unavailable)."""

    pass


class JellyfinAuthError(JellyfinError):
    """Authentication error."""

    pass


class JellyfinConnectionError(JellyfinError):
    """Connection error."""

    pass


class JellyfinResponseError(JellyfinError):
    """Response body could not be decoded."""

    pass


class JellyfinClient:
    """Client for Jellyfin API.

    Usage:
        client = JellyfinClient(
            server_url="http://jellyfin.local:8096",
            api_key="your-api-key",
            user_id="user-guid"
        )

        folders = await client.list_media_folders()
        movies = await client.list_movies(library_id="folder-guid")
    """

    def __init__(
        self,
        server_url: str,
        api_key: str,
        user_id: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = API_TIMEOUT_EXTERNAL,
    ):
        """Initialize Jellyfin client.

        Args:
            server_url: Jellyfin server URL (e.g., http://localhost:8096)
            api_key: API key generated in Jellyfin dashboard
            user_id: User GUID for user-specific operations
            http_client: Shared httpx client (a pooled one is used by default)
            timeout: Per-request timeout in seconds
        """
        self.server_url = server_url.rstrip("/")
        self.api_key = api_key
        self.user_id = user_id
        self.timeout = timeout
        self._http = http_client

    def _get_headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            JELLYFIN_AUTH_HEADER: self.api_key,
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make API request.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            JellyfinAuthError: On 401/403 errors
            JellyfinConnectionError: On connection errors
            JellyfinResponseError: On invalid JSON
            JellyfinError: On other errors
        """
        url = f"{self.server_url}{endpoint}"
        http = self._http or get_jellyfin_http_client()

        try:
            response = await http.request(
                method=method,
                url=url,
                headers=self._get_headers(),
                params=params,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise JellyfinConnectionError(f"Connection timeout: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise JellyfinConnectionError(f"Cannot connect to Jellyfin: {e}") from e

        if response.status_code == 401:
            raise JellyfinAuthError("Invalid API key")

        if response.status_code == 403:
            raise JellyfinAuthError("Access denied")

        if not response.is_success:
            raise JellyfinError(f"Jellyfin returned status {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise JellyfinResponseError(f"Invalid JSON from {endpoint}: {e}") from e

    async def _get(
        self,
        endpoint: str,
        adapter: type[BaseModel] | TypeAdapter,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET an endpoint and validate the body against a schema."""
        data = await self._request("GET", endpoint, params=params)
        try:
            if isinstance(adapter, TypeAdapter):
                return adapter.validate_python(data)
            return adapter.model_validate(data)
        except ValidationError as e:
            raise JellyfinResponseError(
                f"Unexpected response from {endpoint}: {e.error_count()} invalid field(s)"
            ) from e

    def _items_endpoint(self) -> str:
        if not self.user_id:
            raise JellyfinError("User ID required for this operation")
        return f"/Users/{self.user_id}/Items"

    # ==================== Users ====================

    async def list_users(self) -> list[JellyfinUser]:
        """Get list of users.

        Returns:
            Jellyfin users, in server order
        """
        return await self._get("/Users", _users_adapter)

    # ==================== Libraries ====================

    async def list_media_folders(self) -> list[MediaFolder]:
        """Get top-level media folders.

        Returns:
            Media folders, in server order
        """
        result: MediaFoldersResponse = await self._get(
            "/Library/MediaFolders", MediaFoldersResponse
        )
        return result.items

    async def probe_library_has_movies(self, library_id: str) -> bool:
        """Check whether a folder contains at least one movie.

        Args:
            library_id: Media folder GUID

        Returns:
            True if the folder holds movie items
        """
        result: ItemsResponse = await self._get(
            self._items_endpoint(),
            ItemsResponse,
            params={
                "ParentId": library_id,
                "IncludeItemTypes": JELLYFIN_ITEM_TYPE_MOVIE,
                "Recursive": "true",
                "Limit": 1,
            },
        )
        return result.total_record_count > 0

    async def list_movies(self, library_id: str) -> list[Movie]:
        """Get movies of a library.

        Args:
            library_id: Media folder GUID

        Returns:
            Up to MAX_MOVIES_PER_LIBRARY movies
        """
        result: ItemsResponse = await self._get(
            self._items_endpoint(),
            ItemsResponse,
            params={
                "ParentId": library_id,
                "IncludeItemTypes": JELLYFIN_ITEM_TYPE_MOVIE,
                "Recursive": "true",
                "Fields": JELLYFIN_MOVIE_FIELDS,
                "StartIndex": 0,
                "Limit": MAX_MOVIES_PER_LIBRARY,
            },
        )
        logger.debug(f"Library {library_id}: {len(result.items)} movies")
        return result.items

    # ==================== Links ====================

    def image_url(self, item_id: str, image_type: str = "Primary") -> str:
        """Get URL for item image.

        Args:
            item_id: Item GUID
            image_type: Primary, Backdrop, Banner, etc.

        Returns:
            Image URL
        """
        return f"{self.server_url}/Items/{item_id}/Images/{image_type}"

    def details_url(self, item_id: str) -> str:
        """Get URL of the item page in the Jellyfin web client."""
        return f"{self.server_url}/web/index.html#!/details?id={item_id}"


# Factory function for creating client from saved configuration
def create_jellyfin_client(config: JellyfinConfig) -> JellyfinClient:
    """Create a Jellyfin client instance.

    Args:
        config: Saved connection settings

    Returns:
        Configured JellyfinClient
    """
    return JellyfinClient(
        server_url=config.jellyfin_url,
        api_key=config.api_key,
        user_id=config.user_id or None,
        timeout=get_settings().jellyfin_timeout,
    )
