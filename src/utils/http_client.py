"""Shared persistent httpx client for Jellyfin API calls.

Using a persistent client avoids creating a new TCP connection + TLS handshake
for every API call, improving performance through connection reuse.
"""

import httpx

from src.constants import API_TIMEOUT_EXTERNAL

# Connection pool limits
_POOL_LIMITS = httpx.Limits(
    max_connections=20,
    max_keepalive_connections=10,
    keepalive_expiry=30,
)

_jellyfin_client: httpx.AsyncClient | None = None


def get_jellyfin_http_client() -> httpx.AsyncClient:
    """Get persistent httpx client for Jellyfin API calls."""
    global _jellyfin_client
    if _jellyfin_client is None:
        _jellyfin_client = httpx.AsyncClient(
            timeout=API_TIMEOUT_EXTERNAL,
            limits=_POOL_LIMITS,
            http2=False,
        )
    return _jellyfin_client


async def close_all_clients() -> None:
    """Close all persistent httpx clients. Call during app shutdown."""
    global _jellyfin_client
    if _jellyfin_client is not None:
        await _jellyfin_client.aclose()
        _jellyfin_client = None
