"""Root conftest — test infrastructure for all tests.

Provides:
- Autouse guard that fails any test reaching the real GitHub HTTP client
- Mocked GitHubService for endpoint tests
- API clients with and without a bearer token
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from commitline.services.github import GitHubService, Success

FAKE_TOKEN = "ghp_fake_token"


@pytest.fixture
def anyio_backend():
    """The application is asyncio-based (``asyncio.gather``); run async tests on asyncio."""
    return "asyncio"


# ─────────────────────────────────────────────────────────────────────────────
# External Service Guard
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def block_github_network():
    """SAFETY: Never let a test reach api.github.com.

    Tests that exercise the HTTP layer patch ``get_github_client`` themselves;
    their patch is applied inside this one and takes precedence.
    """
    unexpected = MagicMock(name="github_client")
    unexpected.get = AsyncMock(side_effect=AssertionError("Unexpected GitHub HTTP call in test"))

    with patch(
        "commitline.services.github.read_operations.get_github_client",
        return_value=unexpected,
    ):
        yield unexpected


# ─────────────────────────────────────────────────────────────────────────────
# Mocked Service
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_github() -> MagicMock:
    """GitHubService stand-in returning empty successes by default."""
    service = MagicMock(spec=GitHubService)
    service.fetch_repositories = AsyncMock(return_value=Success([]))
    service.fetch_commits = AsyncMock(return_value=Success([]))
    service.get_display_name = AsyncMock(return_value="Octo Cat")
    return service


# ─────────────────────────────────────────────────────────────────────────────
# API Clients
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def api_client(mock_github: MagicMock):
    """HTTP client sending a bearer token, with GitHubService replaced by mock_github.

    Overrides: get_github_service
    """
    from commitline.api.deps.auth import get_github_service
    from commitline.main import app

    app.dependency_overrides[get_github_service] = lambda: mock_github

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {FAKE_TOKEN}"},
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def unauthenticated_client():
    """HTTP client with no Authorization header and no dependency overrides."""
    from commitline.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
