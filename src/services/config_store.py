"""JSON persistence for the Jellyfin configuration.

The file lives in the Docker data volume when it is mounted, and next to
the working directory otherwise.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from src.config import get_settings
from src.models.config import JellyfinConfig

logger = logging.getLogger(__name__)


class ConfigStoreError(Exception):
    """Configuration could not be read or written."""

    pass


class ConfigStore:
    """Load and save `JellyfinConfig` as a JSON file.

    Usage:
        store = ConfigStore("/app/data/config.json", "config.json")
        config = store.load()  # None when nothing was saved yet
        store.save(config)
    """

    def __init__(self, primary_path: str | Path, fallback_path: str | Path):
        self.primary_path = Path(primary_path)
        self.fallback_path = Path(fallback_path)

    def _read_path(self) -> Path:
        if self.primary_path.exists():
            return self.primary_path
        return self.fallback_path

    def _write_path(self) -> Path:
        if self.primary_path.parent.is_dir():
            return self.primary_path
        return self.fallback_path

    def load(self) -> JellyfinConfig | None:
        """Load the saved configuration.

        Returns:
            The configuration, or None if no file exists or it is unreadable
        """
        path = self._read_path()
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return JellyfinConfig.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return None

    def save(self, config: JellyfinConfig) -> Path:
        """Write the configuration to disk.

        Returns:
            Path the configuration was written to

        Raises:
            ConfigStoreError: If the file cannot be written
        """
        path = self._write_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                json.dumps(config.model_dump(), indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigStoreError(f"Cannot write config to {path}: {e}") from e

        logger.info(f"Saved config to {path}")
        return path


def create_config_store() -> ConfigStore:
    """Create a store using the configured paths."""
    settings = get_settings()
    return ConfigStore(settings.config_path, settings.config_fallback_path)
