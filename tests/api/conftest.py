"""API test fixtures — canned GitHub results for the mocked service.

Builds on root conftest fixtures (mock_github, api_client,
unauthenticated_client, block_github_network).
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from commitline.services.github import RateLimited
from tests.helpers.factories import make_commit, make_repository


@pytest.fixture
def sample_repositories():
    return [
        make_repository(github_id=1, name="alpha", owner="octo"),
        make_repository(github_id=2, name="beta", owner="octo", private=True),
    ]


@pytest.fixture
def sample_commits():
    """Three commits over two days, newest first as the aggregator returns them."""
    return [
        make_commit("c3", "2026-01-11T09:00:00Z", "Ship it", "Octo Cat"),
        make_commit("c2", "2026-01-10T18:00:00Z", "Add tests", "Mona"),
        make_commit("c1", "2026-01-10T08:00:00Z", "Initial commit", "Octo Cat"),
    ]


@pytest.fixture
def rate_limited():
    return RateLimited(
        retry_after_minutes=7,
        reset_at=datetime(2026, 1, 10, 12, 7, tzinfo=UTC),
    )
