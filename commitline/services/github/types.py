"""Data types for GitHub API responses and fetch outcomes."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Repository:
    """Normalized GitHub repository owned by the authenticated user."""

    id: int
    name: str
    full_name: str  # owner/name
    private: bool
    updated_at: datetime


@dataclass(frozen=True)
class Commit:
    """Normalized commit. Carries no reference to its source repository."""

    sha: str
    message: str
    date: datetime  # author date, timezone-aware UTC
    author: str


@dataclass(frozen=True)
class DateRange:
    """Optional commit window. A missing bound is unbounded on that side."""

    since: datetime | None = None
    until: datetime | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.since is None and self.until is None


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful fetch carrying its data."""

    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class RateLimited:
    """GitHub refused the request because the rate limit quota is spent."""

    retry_after_minutes: int  # always >= 1
    reset_at: datetime
    ok: ClassVar[bool] = False

    @property
    def message(self) -> str:
        unit = "minute" if self.retry_after_minutes == 1 else "minutes"
        return (
            "GitHub API rate limit exceeded. "
            f"Try again in {self.retry_after_minutes} {unit}."
        )


# Tagged result propagated from the read operations up to the API layer
Outcome: TypeAlias = Success[T] | RateLimited
