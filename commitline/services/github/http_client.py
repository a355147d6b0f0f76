"""
Shared HTTP client for GitHub API operations.

One pooled AsyncClient serves every request. Commit fetches for several
repositories run concurrently and share its connections, so the pool size
also bounds how many pages are in flight at once.
"""

import logging

import httpx

from commitline.config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_github_client() -> httpx.AsyncClient:
    """
    Return the shared client, creating it on first use or after it was closed.

    Tokens travel as per-request headers, so nothing user-specific is stored
    on the client.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                settings.github_timeout_seconds,
                connect=settings.github_connect_timeout_seconds,
            ),
            limits=httpx.Limits(
                max_connections=settings.github_max_connections,
                max_keepalive_connections=settings.github_max_connections // 2,
            ),
            http2=True,  # Enable HTTP/2 for GitHub API
        )
        logger.debug(f"Created GitHub HTTP client (pool={settings.github_max_connections})")
    return _client


async def close_github_client() -> None:
    """Close the shared client. Called from the app lifespan on shutdown."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed GitHub HTTP client")
