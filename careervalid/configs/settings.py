"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Top-level fields read unprefixed environment variables (LOG_LEVEL);
each sub-settings class reads its own prefix (GEMINI_, GITHUB_,
PORTFOLIO_, SERVER_).

Dependencies: pydantic_settings, all config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from careervalid.configs.gemini import GeminiSettings
from careervalid.configs.github import GitHubSettings
from careervalid.configs.portfolio import PortfolioSettings
from careervalid.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    portfolio: PortfolioSettings = Field(default_factory=PortfolioSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings: Application settings, read from the environment once

    Usage:
        from careervalid.configs import get_settings
        settings = get_settings()
    """
    return Settings()
