"""GitHub token extraction and service construction dependencies.

Token issuance and session storage happen outside this service: the frontend
forwards the user's GitHub OAuth access token as a bearer credential.
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from commitline.core.exceptions import UnauthorizedError
from commitline.services.github import GitHubService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def get_github_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """Return the caller's GitHub token, raising 401 if none was sent."""
    if not credentials or not credentials.credentials.strip():
        raise UnauthorizedError()
    return credentials.credentials.strip()


async def get_github_service(
    token: str = Depends(get_github_token),
) -> GitHubService:
    """GitHubService bound to the caller's token."""
    return GitHubService(token)


# Type alias for cleaner dependency injection
GitHub = Annotated[GitHubService, Depends(get_github_service)]
