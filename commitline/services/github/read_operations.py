"""
GitHub API read operations.

Provides the read-only operations the dashboard needs:
- Repositories owned by the authenticated user
- Commit history of a repository within an optional date window
- The authenticated user's profile

Listings page through the API until exhaustion and return an Outcome:
a rate-limited response aborts the loop and is surfaced as ``RateLimited``;
any other failure is logged and degrades to an empty ``Success``.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from commitline.config import settings
from commitline.services.github.exceptions import GitHubAPIError, MalformedResponseError
from commitline.services.github.helpers import (
    detect_rate_limit,
    format_github_datetime,
    handle_error_response,
    parse_github_datetime,
)
from commitline.services.github.http_client import get_github_client
from commitline.services.github.types import (
    Commit,
    DateRange,
    Outcome,
    Repository,
    Success,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    Uses a shared HTTP client singleton for connection pooling. No retries are
    attempted; a rate limit is reported to the caller, never waited out.
    """

    def __init__(self, token: str):
        self.token = token
        self.base_url = settings.github_api_url.rstrip("/")
        self.page_size = settings.github_page_size
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.github_api_version,
        }

    def _normalize_repo(self, data: dict[str, Any]) -> Repository:
        """Convert GitHub API response to Repository dataclass."""
        return Repository(
            id=int(data["id"]),
            name=data["name"],
            full_name=data["full_name"],
            private=bool(data.get("private", False)),
            updated_at=parse_github_datetime(data["updated_at"]),
        )

    def _normalize_commit(self, data: dict[str, Any]) -> Commit:
        """Convert GitHub API response to Commit dataclass."""
        commit = data["commit"]
        author = commit["author"]
        return Commit(
            sha=data["sha"],
            message=commit["message"],
            date=parse_github_datetime(author["date"]),
            author=author["name"],
        )

    async def _paginate(
        self,
        path: str,
        params: dict[str, str],
        normalize: Callable[[dict[str, Any]], T],
        resource: str,
    ) -> Outcome[list[T]]:
        """
        Fetch every page of a listing endpoint in ascending page order.

        Stops on an empty page or one shorter than the page size. Each page is
        checked for the rate limit signal before anything else.

        Raises:
            GitHubAPIError: Non-success status or a body that can't be normalized
            httpx.HTTPError: Transport failure
        """
        client = get_github_client()
        items: list[T] = []
        page = 1

        while True:
            response = await client.get(
                f"{self.base_url}{path}",
                headers=self._headers,
                params={**params, "per_page": str(self.page_size), "page": str(page)},
            )

            rate_limited = detect_rate_limit(response)
            if rate_limited is not None:
                logger.info(
                    f"GitHub rate limit hit on {resource} page {page}, "
                    f"resets in {rate_limited.retry_after_minutes} min"
                )
                return rate_limited

            handle_error_response(response, resource)

            try:
                data = response.json()
            except ValueError as e:
                raise MalformedResponseError(f"invalid JSON ({e})", response.status_code) from e
            if not isinstance(data, list):
                raise MalformedResponseError(
                    f"expected a list, got {type(data).__name__}", response.status_code
                )

            if not data:
                break

            try:
                items.extend(normalize(item) for item in data)
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedResponseError(
                    f"unexpected item shape ({e!r})", response.status_code
                ) from e

            # If we got fewer than a full page, we've reached the last one
            if len(data) < self.page_size:
                break

            page += 1

        return Success(items)

    async def list_repositories(self) -> Outcome[list[Repository]]:
        """
        Fetch all repositories of the authenticated user, most recently updated first.

        Returns:
            Success with every repository, RateLimited, or Success([]) when
            GitHub fails for any other reason
        """
        try:
            return await self._paginate(
                "/user/repos",
                {"sort": "updated"},
                self._normalize_repo,
                "user/repos",
            )
        except (GitHubAPIError, httpx.HTTPError) as e:
            logger.warning(f"Failed to list repositories, returning none: {e}")
            return Success([])

    async def list_commits(
        self,
        full_name: str,
        date_range: DateRange | None = None,
    ) -> Outcome[list[Commit]]:
        """
        Fetch all commits of a repository, optionally filtered server-side by date.

        Args:
            full_name: Repository in "owner/repo" form
            date_range: Optional since/until window passed to GitHub as query params

        Returns:
            Success with the commits, RateLimited, or Success([]) when GitHub
            fails for any other reason

        Raises:
            ValueError: If full_name is not in "owner/repo" form
        """
        owner, repo = split_full_name(full_name)

        params: dict[str, str] = {}
        if date_range is not None:
            if date_range.since is not None:
                params["since"] = format_github_datetime(date_range.since)
            if date_range.until is not None:
                params["until"] = format_github_datetime(date_range.until)

        try:
            return await self._paginate(
                f"/repos/{owner}/{repo}/commits",
                params,
                self._normalize_commit,
                full_name,
            )
        except (GitHubAPIError, httpx.HTTPError) as e:
            logger.warning(f"Failed to list commits for {full_name}, returning none: {e}")
            return Success([])

    async def get_authenticated_user(self) -> dict[str, Any]:
        """
        Fetch authenticated user info.

        Returns:
            Dict with user info (login, name, avatar_url, etc.)

        Raises:
            GitHubAPIError: On any non-success response, transport failure,
                or a body that is not a JSON object
        """
        client = get_github_client()
        try:
            response = await client.get(f"{self.base_url}/user", headers=self._headers)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"GitHub user lookup failed: {e}") from e

        handle_error_response(response, "user")

        try:
            result = response.json()
        except ValueError as e:
            raise MalformedResponseError("user is not JSON") from e
        if not isinstance(result, dict):
            raise MalformedResponseError("user is not an object")
        return result


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split "owner/repo" into its parts, rejecting anything else."""
    if not isinstance(full_name, str):
        raise ValueError(f"Repository name must be a string, got {type(full_name).__name__}")
    owner, sep, repo = full_name.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ValueError(f"Repository name must look like 'owner/repo': {full_name!r}")
    return owner, repo
