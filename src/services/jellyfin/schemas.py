"""Jellyfin API response schemas.

Field names follow the PascalCase keys returned by Jellyfin. Unknown keys are
ignored so newer server versions do not break decoding.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.constants import SECONDS_PER_MINUTE, TICKS_PER_SECOND


class JellyfinSchema(BaseModel):
    """Base schema for Jellyfin payloads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JellyfinUser(JellyfinSchema):
    """Represents a Jellyfin user (`GET /Users`)."""

    id: str = Field(..., alias="Id")
    name: str = Field(..., alias="Name")


class MediaFolder(JellyfinSchema):
    """Top-level media folder (`GET /Library/MediaFolders`)."""

    id: str = Field(..., alias="Id")
    name: str = Field("", alias="Name")
    collection_type: str = Field("", alias="CollectionType")

    @field_validator("collection_type", mode="before")
    @classmethod
    def empty_when_unset(cls, v: str | None) -> str:
        return v or ""


class MediaFoldersResponse(JellyfinSchema):
    """Envelope returned by `GET /Library/MediaFolders`."""

    items: list[MediaFolder] = Field(default_factory=list, alias="Items")


class Movie(JellyfinSchema):
    """Movie item from `GET /Users/{id}/Items`."""

    id: str = Field(..., alias="Id")
    name: str = Field("", alias="Name")
    production_year: int | None = Field(None, alias="ProductionYear")
    runtime_ticks: int | None = Field(None, alias="RunTimeTicks")  # 1 tick = 100 nanoseconds
    community_rating: float | None = Field(None, alias="CommunityRating")
    overview: str | None = Field(None, alias="Overview")

    @property
    def duration_minutes(self) -> int | None:
        """Convert runtime ticks to whole minutes (truncated)."""
        if self.runtime_ticks is None:
            return None
        return self.runtime_ticks // TICKS_PER_SECOND // SECONDS_PER_MINUTE


class ItemsResponse(JellyfinSchema):
    """Envelope returned by `GET /Users/{id}/Items`."""

    items: list[Movie] = Field(default_factory=list, alias="Items")
    total_record_count: int = Field(0, alias="TotalRecordCount")
