"""Tests for configuration persistence and application state."""

import asyncio
import json
from pathlib import Path

import pytest

from src.models.config import JellyfinConfig
from src.models.schemas import Library
from src.services.config_store import ConfigStore, ConfigStoreError
from src.state import AppState


class TestJellyfinConfig:
    """Tests for the config model."""

    def test_trailing_slash_removed(self):
        assert JellyfinConfig(jellyfin_url="http://jf:8096/").jellyfin_url == "http://jf:8096"

    def test_completeness(self):
        config = JellyfinConfig(jellyfin_url="http://jf", api_key="k")
        assert config.has_connection
        assert not config.is_complete
        assert config.model_copy(update={"user_id": "u1"}).is_complete


class TestConfigStore:
    """Tests for ConfigStore."""

    def test_load_missing(self, config_store: ConfigStore):
        assert config_store.load() is None

    def test_save_to_primary(self, config_store: ConfigStore):
        config = JellyfinConfig(jellyfin_url="http://jf", api_key="k", user_id="u1", user_name="A")

        path = config_store.save(config)

        assert path == config_store.primary_path
        assert json.loads(path.read_text()) == {
            "jellyfin_url": "http://jf",
            "api_key": "k",
            "user_id": "u1",
            "user_name": "A",
        }
        assert config_store.load() == config

    def test_fallback_when_volume_missing(self, tmp_path: Path):
        store = ConfigStore(tmp_path / "missing" / "config.json", tmp_path / "config.json")

        path = store.save(JellyfinConfig(jellyfin_url="http://jf", api_key="k"))

        assert path == tmp_path / "config.json"
        assert not (tmp_path / "missing").exists()
        assert store.load().jellyfin_url == "http://jf"

    def test_corrupt_file_ignored(self, config_store: ConfigStore):
        config_store.primary_path.write_text("{not json")
        assert config_store.load() is None

    def test_write_error(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        store = ConfigStore(tmp_path / "missing" / "config.json", blocker / "config.json")

        with pytest.raises(ConfigStoreError):
            store.save(JellyfinConfig())


class TestAppState:
    """Tests for AppState."""

    @pytest.mark.asyncio
    async def test_setup_steps_persist(self, app_state: AppState, config_store: ConfigStore):
        await app_state.save_connection("http://jf/", "key")
        await app_state.save_user("u1", "Alice")

        saved = config_store.load()
        assert saved == JellyfinConfig(
            jellyfin_url="http://jf", api_key="key", user_id="u1", user_name="Alice"
        )
        assert app_state.config.is_complete

    @pytest.mark.asyncio
    async def test_new_connection_clears_libraries(self, app_state: AppState, fake_jellyfin):
        await app_state.refresh_libraries(fake_jellyfin)
        assert app_state.libraries

        await app_state.save_connection("http://other", "key")

        assert app_state.libraries == []

    @pytest.mark.asyncio
    async def test_ensure_libraries_uses_cache(self, app_state: AppState, fake_jellyfin):
        first = await app_state.ensure_libraries(fake_jellyfin)
        second = await app_state.ensure_libraries(fake_jellyfin)

        assert first == second == [Library(name="Movies", id="L1"), Library(name="Mixed", id="L3")]
        fake_jellyfin.list_media_folders.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reload_missing_config(self, app_state: AppState):
        assert await app_state.reload_config() is None
        assert not app_state.config.has_connection


class TestAppStateLocking:
    """Tests for serialized state mutations."""

    @staticmethod
    def block_folder_listing(fake_jellyfin) -> asyncio.Event:
        """Make list_media_folders wait until the returned event is set."""
        release = asyncio.Event()
        folders = fake_jellyfin.list_media_folders.return_value

        async def wait_for_release():
            await release.wait()
            return folders

        fake_jellyfin.list_media_folders.side_effect = wait_for_release
        return release

    @pytest.mark.asyncio
    async def test_save_waits_for_running_refresh(self, app_state: AppState, fake_jellyfin):
        """Test that a refresh started before a reconnect cannot restore stale libraries."""
        release = self.block_folder_listing(fake_jellyfin)

        refresh = asyncio.create_task(app_state.refresh_libraries(fake_jellyfin))
        await asyncio.sleep(0)
        save = asyncio.create_task(app_state.save_connection("http://other", "key"))
        await asyncio.sleep(0)

        assert not save.done()

        release.set()
        await asyncio.gather(refresh, save)

        assert app_state.libraries == []
        assert app_state.config.jellyfin_url == "http://other"

    @pytest.mark.asyncio
    async def test_concurrent_ensure_discovers_once(self, app_state: AppState, fake_jellyfin):
        """Test that simultaneous first visits share one discovery."""
        release = self.block_folder_listing(fake_jellyfin)

        first = asyncio.create_task(app_state.ensure_libraries(fake_jellyfin))
        second = asyncio.create_task(app_state.ensure_libraries(fake_jellyfin))
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(first, second)

        assert results[0] == results[1] == [
            Library(name="Movies", id="L1"),
            Library(name="Mixed", id="L3"),
        ]
        fake_jellyfin.list_media_folders.assert_awaited_once()
