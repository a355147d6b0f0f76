"""Pydantic schemas for shareable dashboard snapshots.

A snapshot is encoded in full into the share token, so no server-side storage
is involved. Field names are camelCase on the wire (``dateFrom``/``dateTo``)
to keep links produced by older clients decodable.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from commitline.schemas.dashboard import DashboardView
from commitline.services.github.helpers import ensure_utc
from commitline.services.github.types import Commit, DateRange


class SharedCommit(BaseModel):
    """Commit as embedded in a share token."""

    sha: str
    message: str
    date: datetime
    author: str

    @classmethod
    def from_commit(cls, commit: Commit) -> "SharedCommit":
        return cls(sha=commit.sha, message=commit.message, date=commit.date, author=commit.author)

    def to_commit(self) -> Commit:
        return Commit(
            sha=self.sha,
            message=self.message,
            date=ensure_utc(self.date),
            author=self.author,
        )


class ShareSnapshot(BaseModel):
    """Everything needed to render a dashboard without GitHub access."""

    model_config = ConfigDict(populate_by_name=True)

    repos: list[str] = Field(min_length=1)
    date_from: datetime | None = Field(default=None, alias="dateFrom")
    date_to: datetime | None = Field(default=None, alias="dateTo")
    username: str
    commits: list[SharedCommit]

    def date_range(self) -> DateRange:
        return DateRange(since=self.date_from, until=self.date_to)

    def to_commits(self) -> list[Commit]:
        return [c.to_commit() for c in self.commits]


class ShareRequest(BaseModel):
    """Body of POST /share. The username is taken from the GitHub token."""

    model_config = ConfigDict(populate_by_name=True)

    # Emptiness is checked by the endpoint so it can answer 400, not 422
    repos: list[str] = Field(default_factory=list)
    date_from: datetime | None = Field(default=None, alias="dateFrom")
    date_to: datetime | None = Field(default=None, alias="dateTo")
    commits: list[SharedCommit] | None = None


class ShareCreated(BaseModel):
    """Response from creating a share link."""

    model_config = ConfigDict(populate_by_name=True)

    share_id: str = Field(serialization_alias="shareId")
    url: str


class SharedView(BaseModel):
    """A decoded snapshot together with its recomputed dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    repos: list[str]
    date_from: datetime | None = Field(default=None, serialization_alias="dateFrom")
    date_to: datetime | None = Field(default=None, serialization_alias="dateTo")
    username: str
    dashboard: DashboardView
