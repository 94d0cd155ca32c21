"""API routers."""

from .analysis import router as analysis_router
from .chat import router as chat_router
from .health import router as health_router
from .resume import router as resume_router
from .sessions import router as sessions_router
from .skills import router as skills_router

__all__ = [
    "analysis_router",
    "chat_router",
    "health_router",
    "resume_router",
    "sessions_router",
    "skills_router",
]
