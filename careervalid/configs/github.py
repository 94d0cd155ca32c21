"""
GitHub API configuration settings.

Dependencies: pydantic_settings
System role: GitHub REST client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """GitHub REST API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(default="https://api.github.com")
    user_agent: str = Field(default="CareerValid-AI")
    token: str | None = Field(
        default=None,
        description="Fallback token used when a request carries none",
    )
    repos_per_page: int = Field(default=100)
    timeout_seconds: float = Field(default=15.0)
    max_attempts: int = Field(
        default=3,
        description="Attempts for transport errors and 5xx responses",
    )
