"""
Commit velocity metrics.

Rates are averaged over whole weeks and whole calendar months of the window,
never fewer than one of each. Growth compares the second half of the window
with the first; a commit exactly on the midpoint belongs to the second half.
"""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from dateutil.relativedelta import relativedelta

from commitline.services.github.helpers import ensure_utc
from commitline.services.github.types import Commit, DateRange
from commitline.services.metrics.types import VelocityMetrics

# Window used when there is neither an explicit start nor any commit
DEFAULT_LOOKBACK = timedelta(days=30)


def whole_weeks_between(start: datetime, end: datetime) -> int:
    """Number of complete weeks from start to end, truncated toward zero."""
    weeks = (end - start) / timedelta(weeks=1)
    return int(weeks)


def whole_months_between(start: datetime, end: datetime) -> int:
    """Number of complete calendar months from start to end, truncated toward zero."""
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


def growth_between(first_half: int, second_half: int) -> float | None:
    """Percentage change from the first half count to the second half count."""
    if first_half > 0:
        return (second_half - first_half) / first_half * 100
    if second_half > 0:
        return 100.0
    return None


def resolve_window(
    commits: Sequence[Commit],
    date_range: DateRange | None,
    now: datetime,
) -> tuple[datetime, datetime]:
    """Pick the window bounds: explicit range, else earliest commit / now."""
    since = date_range.since if date_range else None
    until = date_range.until if date_range else None

    end = ensure_utc(until) if until is not None else now
    if since is not None:
        start = ensure_utc(since)
    elif commits:
        start = min(ensure_utc(c.date) for c in commits)
    else:
        start = now - DEFAULT_LOOKBACK
    return start, end


def compute_velocity(
    commits: Sequence[Commit],
    date_range: DateRange | None = None,
    now: datetime | None = None,
) -> VelocityMetrics:
    """
    Compute weekly and monthly commit rates plus half-over-half growth.

    Args:
        commits: Commits in any order
        date_range: Explicit window; missing bounds fall back to the earliest
            commit (or 30 days ago) and now
        now: Reference instant, defaults to the current UTC time

    Returns:
        VelocityMetrics for the window
    """
    now = ensure_utc(now) if now is not None else datetime.now(UTC)
    start, end = resolve_window(commits, date_range, now)

    total_weeks = max(1, whole_weeks_between(start, end))
    total_months = max(1, whole_months_between(start, end))
    total_commits = len(commits)

    midpoint = start + (end - start) / 2
    first_half = 0
    second_half = 0
    for commit in commits:
        commit_date = ensure_utc(commit.date)
        if start <= commit_date < midpoint:
            first_half += 1
        elif midpoint <= commit_date <= end:
            second_half += 1

    return VelocityMetrics(
        total_commits=total_commits,
        weekly_rate=round(total_commits / total_weeks, 1),
        monthly_rate=round(total_commits / total_months, 1),
        growth_percentage=growth_between(first_half, second_half),
        start_date=start,
        end_date=end,
    )
