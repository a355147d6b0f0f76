"""
Share link endpoints.

Links are stateless: the snapshot (repositories, window, commits and the
sharer's name) is encoded into the link itself, so nothing is stored.
"""

import logging

import httpx
from fastapi import APIRouter

from commitline.api.deps import GitHub
from commitline.config import settings
from commitline.core.exceptions import UnauthorizedError, ValidationError
from commitline.schemas.dashboard import DashboardView
from commitline.schemas.share import ShareCreated, SharedView, ShareRequest, ShareSnapshot
from commitline.services.github import GitHubAPIError
from commitline.services.github.service import ANONYMOUS_USERNAME
from commitline.services.share import InvalidShareError, decode_share, encode_share

router = APIRouter(prefix="/share", tags=["share"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ShareCreated)
async def create_share_link(data: ShareRequest, github: GitHub) -> ShareCreated:
    """Encode the current dashboard selection and commits into a share link."""
    if not data.repos:
        raise ValidationError("At least one repository is required")
    if data.commits is None:
        raise ValidationError("Commits data is required")

    try:
        username = await github.get_display_name()
    except (GitHubAPIError, httpx.HTTPError) as e:
        if isinstance(e, GitHubAPIError) and e.status_code == 401:
            raise UnauthorizedError("Invalid or expired GitHub token") from None
        logger.warning(f"Could not resolve GitHub user for share link: {e}")
        username = ANONYMOUS_USERNAME

    snapshot = ShareSnapshot(
        repos=data.repos,
        date_from=data.date_from,
        date_to=data.date_to,
        username=username,
        commits=data.commits,
    )
    share_id = encode_share(snapshot)
    logger.info(f"Created share link for {len(data.repos)} repos, {len(data.commits)} commits")

    return ShareCreated(share_id=share_id, url=settings.share_url(share_id))


@router.get("/{share_id}", response_model=SharedView)
async def get_shared_view(share_id: str) -> SharedView:
    """Decode a share link and rebuild its dashboard. No authentication needed."""
    try:
        snapshot = decode_share(share_id)
    except InvalidShareError:
        raise ValidationError("Invalid share ID") from None

    return SharedView(
        repos=snapshot.repos,
        date_from=snapshot.date_from,
        date_to=snapshot.date_to,
        username=snapshot.username,
        dashboard=DashboardView.from_commits(snapshot.to_commits(), snapshot.date_range()),
    )
