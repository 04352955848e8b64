"""Application models."""

from src.models.config import JellyfinConfig
from src.models.schemas import (
    HealthResponse,
    Library,
    MovieResponse,
    SetupConnectForm,
    SetupUserForm,
)

__all__ = [
    "JellyfinConfig",
    "HealthResponse",
    "Library",
    "MovieResponse",
    "SetupConnectForm",
    "SetupUserForm",
]
