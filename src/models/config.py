"""Persisted Jellyfin connection configuration."""

from pydantic import BaseModel, field_validator


class JellyfinConfig(BaseModel):
    """Connection settings saved by the setup flow.

    Populated in two steps: server URL and API key first, then the
    selected user.
    """

    jellyfin_url: str = ""
    api_key: str = ""
    user_id: str = ""
    user_name: str = ""

    @field_validator("jellyfin_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the server URL without a trailing slash."""
        return v.strip().rstrip("/")

    @property
    def has_connection(self) -> bool:
        """Check if server URL and API key are set."""
        return bool(self.jellyfin_url and self.api_key)

    @property
    def is_complete(self) -> bool:
        """Check if setup finished (connection + selected user)."""
        return self.has_connection and bool(self.user_id)
