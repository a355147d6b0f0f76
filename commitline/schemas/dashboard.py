"""Pydantic schemas for the dashboard payload.

A dashboard view bundles the merged commit list with the metrics derived from
it. Both the live commits endpoint and resolved share links return this shape,
so the chart and metric cards render the same way in either place.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from commitline.services.github.types import Commit, DateRange, Repository
from commitline.services.metrics import (
    ChartDataPoint,
    VelocityMetrics,
    axis_date_format,
    build_cumulative_series,
    compute_velocity,
)


class RepositoryOut(BaseModel):
    """Repository offered in the selector."""

    id: int
    name: str
    full_name: str
    private: bool
    updated_at: datetime

    @classmethod
    def from_repository(cls, repo: Repository) -> "RepositoryOut":
        return cls(
            id=repo.id,
            name=repo.name,
            full_name=repo.full_name,
            private=repo.private,
            updated_at=repo.updated_at,
        )


class CommitOut(BaseModel):
    """A commit in the merged timeline."""

    sha: str
    message: str
    date: datetime
    author: str

    @classmethod
    def from_commit(cls, commit: Commit) -> "CommitOut":
        return cls(sha=commit.sha, message=commit.message, date=commit.date, author=commit.author)


class ChartPointOut(BaseModel):
    """One point of the cumulative series."""

    date: date
    cumulative_count: int = Field(ge=0)
    formatted_date: str

    @classmethod
    def from_point(cls, point: ChartDataPoint) -> "ChartPointOut":
        return cls(
            date=point.date,
            cumulative_count=point.cumulative_count,
            formatted_date=point.formatted_date,
        )


class ChartOut(BaseModel):
    """Cumulative series plus the tick format suited to its span."""

    points: list[ChartPointOut]
    axis_date_format: str = Field(description="strftime pattern for x-axis ticks")


class VelocityOut(BaseModel):
    """Velocity metric cards."""

    total_commits: int
    weekly_rate: float
    monthly_rate: float
    growth_percentage: float | None
    growth_display: str = Field(description='e.g. "+12.5%" or "N/A"')
    growth_description: str
    start_date: datetime
    end_date: datetime

    @classmethod
    def from_metrics(cls, metrics: VelocityMetrics) -> "VelocityOut":
        return cls(
            total_commits=metrics.total_commits,
            weekly_rate=metrics.weekly_rate,
            monthly_rate=metrics.monthly_rate,
            growth_percentage=metrics.growth_percentage,
            growth_display=metrics.format_growth(),
            growth_description=metrics.growth_description(),
            start_date=metrics.start_date,
            end_date=metrics.end_date,
        )


class DashboardView(BaseModel):
    """Commits with their chart series and velocity metrics."""

    commits: list[CommitOut]
    chart: ChartOut
    metrics: VelocityOut

    @classmethod
    def from_commits(
        cls,
        commits: list[Commit],
        date_range: DateRange | None = None,
        now: datetime | None = None,
    ) -> "DashboardView":
        """Recompute every derived value from the commit list."""
        points = build_cumulative_series(commits)
        return cls(
            commits=[CommitOut.from_commit(c) for c in commits],
            chart=ChartOut(
                points=[ChartPointOut.from_point(p) for p in points],
                axis_date_format=axis_date_format(points),
            ),
            metrics=VelocityOut.from_metrics(compute_velocity(commits, date_range, now)),
        )


class RepositoriesResponse(BaseModel):
    """Response for listing the user's repositories."""

    repositories: list[RepositoryOut]


class RateLimitDetail(BaseModel):
    """Body detail of a 429 response."""

    message: str
    retry_after_minutes: int = Field(ge=1)


class RateLimitResponse(BaseModel):
    """429 response body, as documented in OpenAPI."""

    detail: RateLimitDetail


# OpenAPI ``responses`` entry for endpoints that fan out to GitHub
RATE_LIMIT_RESPONSES: dict[int | str, dict] = {
    429: {"model": RateLimitResponse, "description": "GitHub rate limit exhausted"},
}
