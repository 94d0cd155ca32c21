"""
Portfolio analysis models and schemas.

Dependencies: pydantic
System role: Portfolio analysis contracts
"""

from datetime import datetime

from pydantic import AnyHttpUrl, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from careervalid.models.common import CamelModel

HTTP_URL = TypeAdapter(AnyHttpUrl)


class PortfolioData(CamelModel):
    """Portfolio analysis stored as the session's portfolioData."""

    url: str
    title: str
    description: str
    insights: str
    analyzed_at: datetime


class PortfolioAnalysisRequest(CamelModel):
    """Request schema for portfolio analysis."""

    session_id: str = Field(min_length=1)
    portfolio_url: str = Field(description="Public http(s) portfolio URL, stored as sent")

    @field_validator("portfolio_url")
    @classmethod
    def validate_portfolio_url(cls, value: str) -> str:
        value = value.strip()
        try:
            HTTP_URL.validate_python(value)
        except PydanticValidationError:
            raise ValueError("Invalid portfolio URL") from None
        return value
