"""Commit timeline endpoint: merged commits, cumulative chart and velocity."""

import logging
from datetime import datetime

from fastapi import APIRouter, Query

from commitline.api.deps import GitHub
from commitline.core.exceptions import RateLimitExceededError, ValidationError
from commitline.schemas.dashboard import RATE_LIMIT_RESPONSES, DashboardView
from commitline.services.github import DateRange, RateLimited
from commitline.services.github.helpers import ensure_utc
from commitline.services.github.read_operations import split_full_name
from commitline.services.metrics import PRESETS, resolve_preset

router = APIRouter(prefix="/commits", tags=["commits"])
logger = logging.getLogger(__name__)


def build_date_range(
    since: datetime | None,
    until: datetime | None,
    preset: str | None,
) -> DateRange | None:
    """Combine a preset with explicit bounds; explicit bounds win."""
    base = DateRange()
    if preset:
        try:
            base = resolve_preset(preset)
        except ValueError as e:
            raise ValidationError(str(e)) from None

    date_range = DateRange(
        since=ensure_utc(since) if since is not None else base.since,
        until=ensure_utc(until) if until is not None else base.until,
    )
    if date_range.since and date_range.until and date_range.since > date_range.until:
        raise ValidationError("'since' must not be after 'until'")
    return None if date_range.is_unbounded else date_range


@router.get("", response_model=DashboardView, responses=RATE_LIMIT_RESPONSES)
async def get_commit_timeline(
    github: GitHub,
    repos: list[str] = Query(default=[], description="Repository full names (owner/repo)"),
    since: datetime | None = Query(None, description="Only commits after this instant (ISO 8601)"),
    until: datetime | None = Query(None, description="Only commits before this instant (ISO 8601)"),
    preset: str | None = Query(None, description=f"Named window: {', '.join(PRESETS)}"),
) -> DashboardView:
    """
    Fetch commits across the selected repositories and derive the dashboard.

    Commits are newest first. The whole batch is rate limited (429) if any
    single repository was.
    """
    date_range = build_date_range(since, until, preset)

    for name in repos:
        try:
            split_full_name(name)
        except ValueError as e:
            raise ValidationError(str(e)) from None

    result = await github.fetch_commits(repos, date_range)

    if isinstance(result, RateLimited):
        raise RateLimitExceededError(result)

    return DashboardView.from_commits(result.value, date_range)
