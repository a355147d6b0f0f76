"""
GitHub service facade used by the API layer.

Exposes the two dashboard entry points:
- fetch_repositories: every repository of the authenticated user
- fetch_commits: merged commit history across a selection of repositories

plus the username lookup used when building share snapshots.
"""

import logging
from collections.abc import Sequence

from commitline.services.github.aggregator import fetch_commits
from commitline.services.github.read_operations import GitHubReadOperations
from commitline.services.github.types import (
    Commit,
    DateRange,
    Outcome,
    Repository,
)

logger = logging.getLogger(__name__)

ANONYMOUS_USERNAME = "Anonymous"


class GitHubService:
    """Service for interacting with GitHub REST API on behalf of one token."""

    def __init__(self, token: str):
        self.token = token
        self._reader = GitHubReadOperations(token)

    async def fetch_repositories(self) -> Outcome[list[Repository]]:
        """List the user's repositories, most recently updated first."""
        return await self._reader.list_repositories()

    async def fetch_commits(
        self,
        repo_full_names: Sequence[str],
        date_range: DateRange | None = None,
    ) -> Outcome[list[Commit]]:
        """Fetch commits across repositories, newest first."""
        return await fetch_commits(self._reader, repo_full_names, date_range)

    async def get_display_name(self) -> str:
        """
        Name to show as the author of a share snapshot.

        Prefers the profile name, then the login.

        Raises:
            GitHubAPIError: If the token is rejected or GitHub fails
        """
        user = await self._reader.get_authenticated_user()
        return user.get("name") or user.get("login") or ANONYMOUS_USERNAME
