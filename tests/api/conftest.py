"""
API test fixtures.

Builds the application with the session store, career agent and boundary
clients overridden through FastAPI dependency_overrides.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from careervalid.api.deps import (
    get_career_agent,
    get_github_client,
    get_portfolio_fetcher,
    get_session_store,
)
from careervalid.boundary.github import GitHubClient
from careervalid.boundary.web import PortfolioFetcher
from careervalid.boundary.web.portfolio_fetcher import PortfolioPage
from careervalid.main import create_app


@pytest.fixture
def mock_github_client(github_profile, github_repositories) -> AsyncMock:
    client = AsyncMock(spec=GitHubClient)
    client.fetch_user_and_repos.return_value = (github_profile, github_repositories)
    return client


@pytest.fixture
def mock_portfolio_fetcher() -> AsyncMock:
    fetcher = AsyncMock(spec=PortfolioFetcher)
    fetcher.fetch.return_value = PortfolioPage(
        url="https://jane.dev/",
        title="Jane Doe",
        description="Developer portfolio",
        content_preview="<html>",
    )
    return fetcher


@pytest.fixture
def client(session_store, mock_career_agent, mock_github_client, mock_portfolio_fetcher):
    """Create test client with overridden dependencies."""
    app = create_app()
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_career_agent] = lambda: mock_career_agent
    app.dependency_overrides[get_github_client] = lambda: mock_github_client
    app.dependency_overrides[get_portfolio_fetcher] = lambda: mock_portfolio_fetcher

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client) -> str:
    """Create a session through the API and return its id."""
    response = client.post("/api/session", json={"sessionId": "api-session"})
    return response.json()["sessionId"]
