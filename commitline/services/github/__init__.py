"""
GitHub service package.

Re-exports all public types and classes.
Usage: `from commitline.services.github import GitHubService, Commit`

Module structure:
- service.py: Main GitHubService facade
- read_operations.py: Paginated read-only API operations
- aggregator.py: Concurrent multi-repository commit fetch
- helpers.py: Rate limit detection and error utilities
- types.py: Data types and the Outcome result
- exceptions.py: Custom exceptions
- http_client.py: Shared connection-pooled client
"""

from commitline.services.github.aggregator import fetch_commits, sort_commits_newest_first
from commitline.services.github.exceptions import GitHubAPIError, MalformedResponseError
from commitline.services.github.helpers import (
    RateLimitInfo,
    detect_rate_limit,
    handle_error_response,
    minutes_until_reset,
)
from commitline.services.github.http_client import close_github_client
from commitline.services.github.read_operations import GitHubReadOperations
from commitline.services.github.service import GitHubService
from commitline.services.github.types import (
    Commit,
    DateRange,
    Outcome,
    RateLimited,
    Repository,
    Success,
)

__all__ = [
    # Service (main entry point)
    "GitHubService",
    # Operations
    "GitHubReadOperations",
    "fetch_commits",
    "sort_commits_newest_first",
    # HTTP client lifecycle
    "close_github_client",
    # Utilities
    "RateLimitInfo",
    "detect_rate_limit",
    "handle_error_response",
    "minutes_until_reset",
    # Exceptions
    "GitHubAPIError",
    "MalformedResponseError",
    # Types
    "Commit",
    "DateRange",
    "Outcome",
    "RateLimited",
    "Repository",
    "Success",
]
