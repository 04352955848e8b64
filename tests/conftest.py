"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.dependencies import get_app_state, get_client_factory
from src.main import app
from src.models.config import JellyfinConfig
from src.services.config_store import ConfigStore
from src.services.jellyfin.client import JellyfinClient
from src.services.jellyfin.schemas import JellyfinUser, MediaFolder, Movie
from src.state import AppState

JELLYFIN_URL = "http://jellyfin.test"
API_KEY = "test-api-key-0123456789"


@pytest.fixture
def config_store(tmp_path: Path) -> ConfigStore:
    """Config store writing under a temporary directory."""
    (tmp_path / "data").mkdir()
    return ConfigStore(tmp_path / "data" / "config.json", tmp_path / "config.json")


@pytest.fixture
def app_state(config_store: ConfigStore) -> AppState:
    """Fresh application state per test."""
    return AppState(config_store)


@pytest.fixture
def complete_config(config_store: ConfigStore) -> JellyfinConfig:
    """Persist a finished setup."""
    config = JellyfinConfig(
        jellyfin_url=JELLYFIN_URL,
        api_key=API_KEY,
        user_id="u1",
        user_name="Alice",
    )
    config_store.save(config)
    return config


@pytest.fixture
def fake_jellyfin() -> JellyfinClient:
    """Jellyfin client with mocked upstream calls."""
    client = JellyfinClient(server_url=JELLYFIN_URL, api_key=API_KEY, user_id="u1")
    client.list_users = AsyncMock(
        return_value=[
            JellyfinUser(Id="u1", Name="Alice"),
            JellyfinUser(Id="u2", Name="Bob"),
        ]
    )
    client.list_media_folders = AsyncMock(
        return_value=[
            MediaFolder(Id="L1", Name="Movies", CollectionType="movies"),
            MediaFolder(Id="L2", Name="Shows", CollectionType="tvshows"),
            MediaFolder(Id="L3", Name="Mixed"),
        ]
    )
    client.probe_library_has_movies = AsyncMock(return_value=True)
    client.list_movies = AsyncMock(
        return_value=[
            Movie(
                Id="m1",
                Name="X",
                ProductionYear=2020,
                RunTimeTicks=7_380_000_000,
                CommunityRating=7.5,
                Overview="A movie.",
            )
        ]
    )
    return client


@pytest.fixture
def client_factory(fake_jellyfin: JellyfinClient):
    """Factory returning the fake client, recording the configs it was built from."""
    configs: list[JellyfinConfig] = []

    def factory(config: JellyfinConfig) -> JellyfinClient:
        configs.append(config)
        fake_jellyfin.server_url = config.jellyfin_url
        fake_jellyfin.user_id = config.user_id or None
        return fake_jellyfin

    factory.configs = configs  # type: ignore[attr-defined]
    return factory


@pytest_asyncio.fixture
async def client(app_state: AppState, client_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the temporary state and fake Jellyfin."""
    app.dependency_overrides[get_app_state] = lambda: app_state
    app.dependency_overrides[get_client_factory] = lambda: client_factory

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

