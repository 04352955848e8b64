"""Process-wide application state.

Holds the saved Jellyfin configuration and the discovered movie libraries.
Every mutation goes through an asyncio lock so concurrent setup submissions
or index requests cannot interleave a save with a library refresh.
"""

import asyncio
import logging
from functools import lru_cache

from src.models.config import JellyfinConfig
from src.models.schemas import Library
from src.services.config_store import ConfigStore, create_config_store
from src.services.jellyfin.client import JellyfinClient
from src.services.jellyfin.libraries import discover_libraries
from src.utils.secrets import mask_secret

logger = logging.getLogger(__name__)


class AppState:
    """Configuration and library cache shared by all requests."""

    def __init__(self, store: ConfigStore):
        self.store = store
        self._config = JellyfinConfig()
        self._libraries: list[Library] = []
        self._lock = asyncio.Lock()

    @property
    def config(self) -> JellyfinConfig:
        """Snapshot of the current configuration."""
        return self._config.model_copy()

    @property
    def libraries(self) -> list[Library]:
        """Snapshot of the cached movie libraries."""
        return list(self._libraries)

    async def reload_config(self) -> JellyfinConfig | None:
        """Reload the configuration from disk.

        Returns:
            The saved configuration, or None if nothing was saved yet
        """
        async with self._lock:
            config = self.store.load()
            if config is not None:
                self._config = config
            return config.model_copy() if config is not None else None

    async def save_connection(self, jellyfin_url: str, api_key: str) -> JellyfinConfig:
        """Store server URL and API key (setup step 1).

        Raises:
            ConfigStoreError: If the config file cannot be written
        """
        async with self._lock:
            config = JellyfinConfig.model_validate(
                {**self._config.model_dump(), "jellyfin_url": jellyfin_url, "api_key": api_key}
            )
            self.store.save(config)
            self._config = config
            # Libraries belong to the previous server
            self._libraries = []

        logger.info(f"Connection saved: {config.jellyfin_url} (key {mask_secret(api_key)})")
        return config.model_copy()

    async def save_user(self, user_id: str, user_name: str) -> JellyfinConfig:
        """Store the selected Jellyfin user (setup step 2).

        Raises:
            ConfigStoreError: If the config file cannot be written
        """
        async with self._lock:
            config = JellyfinConfig.model_validate(
                {**self._config.model_dump(), "user_id": user_id, "user_name": user_name}
            )
            self.store.save(config)
            self._config = config

        logger.info(f"Selected Jellyfin user {user_name or user_id}")
        return config.model_copy()

    async def refresh_libraries(self, client: JellyfinClient) -> list[Library]:
        """Rediscover movie libraries and replace the cache.

        Raises:
            JellyfinError: If the folder listing fails
        """
        async with self._lock:
            libraries = await discover_libraries(client)
            self._libraries = libraries
        return list(libraries)

    async def ensure_libraries(self, client: JellyfinClient) -> list[Library]:
        """Return cached libraries, discovering them if the cache is empty.

        Raises:
            JellyfinError: If the folder listing fails
        """
        async with self._lock:
            if not self._libraries:
                self._libraries = await discover_libraries(client)
            return list(self._libraries)


@lru_cache
def get_app_state() -> AppState:
    """Get the application state singleton."""
    return AppState(create_config_store())
