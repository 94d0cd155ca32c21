"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    analysis_router,
    chat_router,
    health_router,
    resume_router,
    sessions_router,
    skills_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(sessions_router)
api_router.include_router(analysis_router)
api_router.include_router(skills_router)
api_router.include_router(resume_router)
api_router.include_router(chat_router)

__all__ = ["api_router"]
