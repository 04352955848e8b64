"""Pydantic schemas for page context, form validation and API responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Library(BaseModel):
    """A Jellyfin media folder that holds movies."""

    name: str
    id: str


# Setup forms
class SetupConnectForm(BaseModel):
    """Setup step 1: server URL and API key."""

    jellyfin_url: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)

    @field_validator("jellyfin_url", mode="before")
    @classmethod
    def normalize_url(cls, v: str) -> str:
        """Trim whitespace and trailing slashes before the non-empty check."""
        return v.strip().rstrip("/") if isinstance(v, str) else v

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class SetupUserForm(BaseModel):
    """Setup step 2: selected Jellyfin user."""

    user_id: str = Field(..., min_length=1)
    user_name: str = ""


# API responses
class MovieResponse(BaseModel):
    """Randomly picked movie, as returned by /random."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    year: int | None = None
    duration: int | None = None  # minutes
    rating: float | None = None
    overview: str | None = None
    image_url: str = Field(..., alias="imageUrl")
    jellyfin_url: str = Field(..., alias="jellyfinUrl")


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str
    version: str
    configured: bool
    libraries: int
