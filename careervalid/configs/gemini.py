"""
Gemini configuration settings.

Settings for the generative-AI text completion service.

Dependencies: pydantic_settings
System role: AI service configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Gemini model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
        description="Google Generative AI API key",
    )
    model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model identifier",
    )
    temperature: float = Field(
        default=0.7,
        description="Sampling temperature",
    )
    timeout_seconds: float = Field(
        default=60.0,
        description="Per-request timeout for completion calls",
    )
    max_retries: int = Field(
        default=2,
        description="Retries performed by the client on transient failures",
    )
