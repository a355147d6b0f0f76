"""Unit tests for multi-repository commit aggregation.

GitHubReadOperations.list_commits is mocked per repository so the tests can
control each repository's Outcome independently.
"""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import anyio
import pytest

from commitline.services.github.aggregator import fetch_commits, sort_commits_newest_first
from commitline.services.github.read_operations import GitHubReadOperations
from commitline.services.github.types import DateRange, RateLimited, Success
from tests.helpers.factories import make_commit

RESET_AT = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _reader(outcomes: dict[str, object]) -> MagicMock:
    """Read operations whose list_commits answers from a name -> Outcome map."""
    reader = MagicMock(spec=GitHubReadOperations)

    async def list_commits(full_name, date_range=None):
        return outcomes[full_name]

    reader.list_commits = AsyncMock(side_effect=list_commits)
    return reader


class TestFetchCommits:
    """Tests for fan-out, merge, and batch Outcome."""

    @pytest.mark.anyio
    async def test_empty_selection_makes_no_calls(self):
        reader = _reader({})

        result = await fetch_commits(reader, [])

        assert result == Success([])
        reader.list_commits.assert_not_called()

    @pytest.mark.anyio
    async def test_merges_and_sorts_newest_first(self):
        reader = _reader(
            {
                "o/a": Success(
                    [make_commit("a2", "2026-01-05T00:00:00Z"), make_commit("a1", "2026-01-01T00:00:00Z")]
                ),
                "o/b": Success([make_commit("b1", "2026-01-03T00:00:00Z")]),
            }
        )

        result = await fetch_commits(reader, ["o/a", "o/b"])

        assert [c.sha for c in result.value] == ["a2", "b1", "a1"]

    @pytest.mark.anyio
    async def test_passes_date_range_to_every_repository(self):
        reader = _reader({"o/a": Success([]), "o/b": Success([])})
        date_range = DateRange(since=datetime(2026, 1, 1, tzinfo=UTC))

        await fetch_commits(reader, ["o/a", "o/b"], date_range)

        for call in reader.list_commits.call_args_list:
            assert call.args[1] is date_range

    @pytest.mark.anyio
    async def test_any_rate_limited_repository_limits_the_batch(self):
        limited = RateLimited(retry_after_minutes=7, reset_at=RESET_AT)
        reader = _reader(
            {
                "o/a": Success([make_commit("a1")]),
                "o/b": limited,
                "o/c": Success([make_commit("c1")]),
            }
        )

        result = await fetch_commits(reader, ["o/a", "o/b", "o/c"])

        assert result == limited
        assert result.ok is False

    @pytest.mark.anyio
    async def test_first_rate_limit_in_input_order_wins(self):
        first = RateLimited(retry_after_minutes=2, reset_at=RESET_AT)
        second = RateLimited(retry_after_minutes=45, reset_at=RESET_AT)
        reader = _reader({"o/a": first, "o/b": second})

        result = await fetch_commits(reader, ["o/a", "o/b"])

        assert result.retry_after_minutes == 2

        result = await fetch_commits(reader, ["o/b", "o/a"])

        assert result.retry_after_minutes == 45

    @pytest.mark.anyio
    async def test_failed_repository_contributes_nothing(self):
        reader = _reader({"o/a": Success([make_commit("a1")]), "o/broken": Success([])})

        result = await fetch_commits(reader, ["o/a", "o/broken"])

        assert [c.sha for c in result.value] == ["a1"]

    @pytest.mark.anyio
    async def test_duplicate_names_are_not_collapsed(self):
        reader = _reader({"o/a": Success([make_commit("a1")])})

        result = await fetch_commits(reader, ["o/a", "o/a"])

        assert reader.list_commits.call_count == 2
        assert len(result.value) == 2

    @pytest.mark.anyio
    async def test_local_errors_propagate(self):
        reader = MagicMock(spec=GitHubReadOperations)
        reader.list_commits = AsyncMock(side_effect=ValueError("bad name"))

        with pytest.raises(ValueError, match="bad name"):
            await fetch_commits(reader, ["nonsense"])

    @pytest.mark.anyio
    async def test_repositories_are_fetched_concurrently(self):
        """Each fetch waits for the other to start; sequential fetching would hang."""
        started = {"o/a": anyio.Event(), "o/b": anyio.Event()}
        other = {"o/a": "o/b", "o/b": "o/a"}
        reader = MagicMock(spec=GitHubReadOperations)

        async def list_commits(full_name, date_range=None):
            started[full_name].set()
            await started[other[full_name]].wait()
            return Success([make_commit(full_name)])

        reader.list_commits = AsyncMock(side_effect=list_commits)

        with anyio.fail_after(2):
            result = await fetch_commits(reader, ["o/a", "o/b"])

        assert len(result.value) == 2


class TestSortCommitsNewestFirst:
    """Tests for the merged ordering."""

    def test_sorting_is_idempotent(self):
        commits = [
            make_commit("c", "2026-01-03T00:00:00Z"),
            make_commit("b", "2026-01-02T00:00:00Z"),
            make_commit("a", "2026-01-01T00:00:00Z"),
        ]

        once = sort_commits_newest_first(commits)

        assert sort_commits_newest_first(once) == once
        assert once == commits

    def test_equal_timestamps_keep_input_order(self):
        commits = [
            make_commit("first", "2026-01-01T00:00:00Z"),
            make_commit("newer", "2026-01-02T00:00:00Z"),
            make_commit("second", "2026-01-01T00:00:00Z"),
        ]

        result = sort_commits_newest_first(commits)

        assert [c.sha for c in result] == ["newer", "first", "second"]

    def test_does_not_mutate_input(self):
        commits = [make_commit("a", "2026-01-01T00:00:00Z"), make_commit("b", "2026-01-02T00:00:00Z")]

        sort_commits_newest_first(commits)

        assert [c.sha for c in commits] == ["a", "b"]
