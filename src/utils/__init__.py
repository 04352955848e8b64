"""Utility modules for the Jellypick application."""

from src.utils.logging import LogContext, setup_logging
from src.utils.request import get_client_ip
from src.utils.secrets import mask_secret

__all__ = [
    # Logging
    "LogContext",
    "setup_logging",
    # Requests
    "get_client_ip",
    # Secrets
    "mask_secret",
]
