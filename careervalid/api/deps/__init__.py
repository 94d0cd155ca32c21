"""FastAPI dependency factories."""

from .dependencies import (
    ServiceCache,
    get_aggregation_service,
    get_analysis_service,
    get_career_agent,
    get_chat_service,
    get_github_client,
    get_portfolio_fetcher,
    get_resume_builder_service,
    get_service_cache,
    get_session_service,
    get_session_store,
    get_settings_dependency,
    get_skill_service,
)

__all__ = [
    "ServiceCache",
    "get_aggregation_service",
    "get_analysis_service",
    "get_career_agent",
    "get_chat_service",
    "get_github_client",
    "get_portfolio_fetcher",
    "get_resume_builder_service",
    "get_service_cache",
    "get_session_service",
    "get_session_store",
    "get_settings_dependency",
    "get_skill_service",
]
