"""
GitHub analysis models and schemas.

Raw GitHub payloads keep GitHub's own snake_case keys; derived objects
are serialized in camelCase like the rest of the API.

Dependencies: pydantic
System role: GitHub analysis contracts
"""

from pydantic import BaseModel, ConfigDict, Field

from careervalid.models.common import CamelModel


class GitHubProfile(BaseModel):
    """Subset of the GitHub user payload; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    login: str
    name: str | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class GitHubRepository(BaseModel):
    """Subset of a GitHub repository payload; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str | None = None
    description: str | None = None
    language: str | None = None
    stargazers_count: int | None = 0
    forks_count: int | None = 0
    size: int | None = 0
    updated_at: str | None = None


class LanguageStat(CamelModel):
    """Share of repository bytes attributed to one language."""

    language: str
    percentage: int
    bytes: int


class GitHubStats(CamelModel):
    """Aggregate repository counters."""

    total_repos: int
    total_stars: int
    total_forks: int


class GitHubData(CamelModel):
    """Composed GitHub analysis stored as the session's githubData."""

    profile: GitHubProfile
    repositories: list[GitHubRepository]
    insights: str
    language_stats: list[LanguageStat]
    stats: GitHubStats


class GitHubAnalysisRequest(CamelModel):
    """Request schema for GitHub profile analysis."""

    session_id: str = Field(min_length=1)
    profile_url: str = Field(min_length=1, description="GitHub profile URL")
    token: str | None = Field(default=None, description="Optional GitHub token")
