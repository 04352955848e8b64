"""Request inspection helpers."""

from fastapi import Request


def get_client_ip(request: Request) -> str:
    """Get the originating client IP.

    Uses the first X-Forwarded-For entry when behind a reverse proxy, the
    peer address otherwise.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"
