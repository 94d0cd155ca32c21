"""
Portfolio fetch configuration settings.

Dependencies: pydantic_settings
System role: Portfolio page fetcher configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortfolioSettings(BaseSettings):
    """Portfolio page fetch configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_agent: str = Field(default="CareerValid-AI")
    timeout_seconds: float = Field(default=15.0)
    max_attempts: int = Field(default=3)
    content_preview_chars: int = Field(
        default=2000,
        description="Characters of page HTML passed to the model",
    )
