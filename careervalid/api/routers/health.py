"""
Health check API endpoints.

Routes: GET /health, GET /health/ai

Dependencies: careervalid.configs
System role: Liveness and AI configuration probes
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from careervalid.api.deps import get_settings_dependency
from careervalid.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe; the session store is in-process so there is nothing else to reach."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/ai", response_model=HealthResponse)
async def ai_health_check(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Report whether an AI API key is configured, without calling the model."""
    if not settings.gemini.api_key:
        return HealthResponse(status="degraded", message="GEMINI_API_KEY is not set")
    return HealthResponse(status="healthy", message=f"Using {settings.gemini.model}")
