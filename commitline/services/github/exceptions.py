"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API.

    Raised by the response helpers for non-success statuses. The listing
    operations catch it and fail open; only direct calls such as
    ``get_authenticated_user`` let it reach the caller.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(GitHubAPIError):
    """GitHub answered 2xx but the body could not be normalized."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(f"Malformed GitHub response: {message}", status_code)
