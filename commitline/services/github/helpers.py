"""
GitHub API helper utilities.

Provides rate limit detection, error response processing and timestamp
conversion shared by the read operations.
"""

import logging
import math
from datetime import UTC, datetime

import httpx

from commitline.services.github.exceptions import GitHubAPIError
from commitline.services.github.types import RateLimited

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Reset time in epoch seconds, or None if missing, not numeric, or out of range."""
        if self.reset is None:
            return None
        try:
            timestamp = int(self.reset.strip())
            datetime.fromtimestamp(timestamp, tz=UTC)
        except (ValueError, OverflowError, OSError):
            return None
        return timestamp

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining is not None and self.remaining.strip() == "0"


def minutes_until_reset(reset_timestamp: int, now: datetime | None = None) -> int:
    """
    Whole minutes until the quota resets, rounded up.

    Never less than 1, even when the reset instant is imminent or already past.
    """
    now = now or datetime.now(UTC)
    reset_at = datetime.fromtimestamp(reset_timestamp, tz=UTC)
    seconds = (reset_at - now).total_seconds()
    return max(1, math.ceil(seconds / 60))


def detect_rate_limit(
    response: httpx.Response,
    now: datetime | None = None,
) -> RateLimited | None:
    """
    Return a RateLimited outcome if the response signals quota exhaustion.

    GitHub signals this with a 403 plus ``X-RateLimit-Remaining: 0`` and a
    numeric ``X-RateLimit-Reset`` (epoch seconds). Any other 403 is an
    ordinary permission failure.
    """
    if response.status_code != 403:
        return None

    rate_info = RateLimitInfo(response)
    reset_timestamp = rate_info.reset_timestamp
    if not rate_info.is_exhausted or reset_timestamp is None:
        return None

    return RateLimited(
        retry_after_minutes=minutes_until_reset(reset_timestamp, now),
        reset_at=datetime.fromtimestamp(reset_timestamp, tz=UTC),
    )


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Handle common error responses from GitHub API.

    Rate limiting must be checked with ``detect_rate_limit`` first; a
    rate-limited 403 that reaches this function is reported as forbidden.

    Args:
        response: The HTTP response from GitHub API
        resource: Resource name for error context ("owner/repo" or an endpoint)

    Raises:
        GitHubAPIError: For authentication, authorization, or other API errors
    """
    if response.is_success:
        return

    if response.status_code == 401:
        raise GitHubAPIError("Invalid or expired GitHub token", 401)
    elif response.status_code == 403:
        raise GitHubAPIError(f"GitHub API forbidden: {resource}", 403)
    elif response.status_code == 404:
        raise GitHubAPIError(f"Repository or resource not found: {resource}", 404)
    raise GitHubAPIError(
        f"GitHub API error: {response.status_code}", response.status_code
    )


def parse_github_datetime(value: str) -> datetime:
    """Parse GitHub ISO timestamps like '2026-01-12T10:11:12Z' to aware UTC datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return ensure_utc(parsed)


def format_github_datetime(value: datetime) -> str:
    """Format a datetime the way GitHub expects it in ``since``/``until`` params."""
    return ensure_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
