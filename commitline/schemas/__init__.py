"""Pydantic schemas for API payloads."""

from commitline.schemas.dashboard import (
    ChartOut,
    ChartPointOut,
    CommitOut,
    DashboardView,
    RATE_LIMIT_RESPONSES,
    RateLimitDetail,
    RateLimitResponse,
    RepositoriesResponse,
    RepositoryOut,
    VelocityOut,
)
from commitline.schemas.share import (
    ShareCreated,
    SharedCommit,
    SharedView,
    ShareRequest,
    ShareSnapshot,
)

__all__ = [
    "ChartOut",
    "ChartPointOut",
    "CommitOut",
    "DashboardView",
    "RATE_LIMIT_RESPONSES",
    "RateLimitDetail",
    "RateLimitResponse",
    "RepositoriesResponse",
    "RepositoryOut",
    "VelocityOut",
    "ShareCreated",
    "SharedCommit",
    "SharedView",
    "ShareRequest",
    "ShareSnapshot",
]
