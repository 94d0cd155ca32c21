"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory session store, mocked career agent, GitHub payload samples
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest

from careervalid.boundary.store import InMemorySessionStore
from careervalid.core.agentic_system.career_agent import CareerAgent


@pytest.fixture
def session_store() -> InMemorySessionStore:
    """Provide a fresh in-memory session store."""
    return InMemorySessionStore()


@pytest.fixture
def session_id() -> str:
    """Provide a test session ID."""
    return "session_1700000000000_abc123xyz"


@pytest.fixture
def mock_career_agent() -> AsyncMock:
    """
    Create mock CareerAgent with canned narrative replies.

    Returns:
        AsyncMock: Mocked CareerAgent
    """
    agent = AsyncMock(spec=CareerAgent)
    agent.analyze_github.return_value = "GitHub insights"
    agent.analyze_resume.return_value = "Resume insights. Overall score: 82/100."
    agent.score_resume.return_value = None
    agent.analyze_portfolio.return_value = "Portfolio insights"
    agent.analyze_skills.return_value = "Skills insights"
    agent.chat.return_value = "Keep building projects!"
    agent.build_resume.return_value = "<html><body>Resume</body></html>"
    return agent


@pytest.fixture
def github_profile() -> dict:
    """Provide a GitHub user payload."""
    return {
        "login": "octocat",
        "name": "The Octocat",
        "bio": "Mascot",
        "public_repos": 8,
        "followers": 100,
        "following": 0,
        "created_at": "2011-01-25T18:44:36Z",
        "updated_at": "2024-01-01T00:00:00Z",
        "html_url": "https://github.com/octocat",
    }


@pytest.fixture
def github_repositories() -> list[dict]:
    """Provide GitHub repository payloads."""
    return [
        {"id": 1, "name": "api", "language": "Go", "stargazers_count": 10, "forks_count": 2, "size": 300},
        {"id": 2, "name": "cli", "language": "Rust", "stargazers_count": 5, "forks_count": 1, "size": 100},
        {"id": 3, "name": "notes", "language": None, "stargazers_count": 1, "forks_count": 0, "size": 999},
    ]
