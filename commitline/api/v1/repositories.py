"""Repository listing endpoint for the dashboard's repository selector."""

import logging

from fastapi import APIRouter

from commitline.api.deps import GitHub
from commitline.core.exceptions import RateLimitExceededError
from commitline.schemas.dashboard import (
    RATE_LIMIT_RESPONSES,
    RepositoriesResponse,
    RepositoryOut,
)
from commitline.services.github import RateLimited

router = APIRouter(prefix="/repositories", tags=["repositories"])
logger = logging.getLogger(__name__)


@router.get("", response_model=RepositoriesResponse, responses=RATE_LIMIT_RESPONSES)
async def list_repositories(github: GitHub) -> RepositoriesResponse:
    """
    List the authenticated user's repositories, most recently updated first.

    GitHub failures other than rate limiting produce an empty list rather
    than an error.
    """
    result = await github.fetch_repositories()
    if isinstance(result, RateLimited):
        raise RateLimitExceededError(result)

    return RepositoriesResponse(
        repositories=[RepositoryOut.from_repository(r) for r in result.value]
    )
