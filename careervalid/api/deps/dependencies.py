"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(session store, career agent, HTTP boundary clients) are built once per
process by ServiceCache; services are cheap and built per request.

Dependencies: careervalid.configs, careervalid.application, careervalid.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from careervalid.application.services import (
    AggregationService,
    AnalysisService,
    ChatService,
    ResumeBuilderService,
    SessionService,
    SkillService,
)
from careervalid.boundary.github import GitHubClient
from careervalid.boundary.store import InMemorySessionStore, SessionStore
from careervalid.boundary.web import PortfolioFetcher
from careervalid.configs import Settings, get_settings
from careervalid.core.agentic_system.career_agent import CareerAgent


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._session_store = None
        self._career_agent = None
        self._github_client = None
        self._portfolio_fetcher = None

    @property
    def session_store(self) -> SessionStore:
        """Get cached session store."""
        if self._session_store is None:
            self._session_store = InMemorySessionStore()
        return self._session_store

    @property
    def career_agent(self) -> CareerAgent:
        """Get cached career agent."""
        if self._career_agent is None:
            self._career_agent = CareerAgent(get_settings().gemini)
        return self._career_agent

    @property
    def github_client(self) -> GitHubClient:
        """Get cached GitHub client."""
        if self._github_client is None:
            self._github_client = GitHubClient(get_settings().github)
        return self._github_client

    @property
    def portfolio_fetcher(self) -> PortfolioFetcher:
        """Get cached portfolio fetcher."""
        if self._portfolio_fetcher is None:
            self._portfolio_fetcher = PortfolioFetcher(get_settings().portfolio)
        return self._portfolio_fetcher

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_store = None
        self._career_agent = None
        self._github_client = None
        self._portfolio_fetcher = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_session_store() -> SessionStore:
    return get_service_cache().session_store


def get_career_agent() -> CareerAgent:
    return get_service_cache().career_agent


def get_github_client() -> GitHubClient:
    return get_service_cache().github_client


def get_portfolio_fetcher() -> PortfolioFetcher:
    return get_service_cache().portfolio_fetcher


def get_session_service(store: SessionStore = Depends(get_session_store)) -> SessionService:
    """
    Get session service instance.

    Args:
        store: Session store (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(store=store)


def get_aggregation_service(
    store: SessionStore = Depends(get_session_store),
) -> AggregationService:
    return AggregationService(store=store)


def get_analysis_service(
    aggregation: AggregationService = Depends(get_aggregation_service),
    agent: CareerAgent = Depends(get_career_agent),
    github_client: GitHubClient = Depends(get_github_client),
    portfolio_fetcher: PortfolioFetcher = Depends(get_portfolio_fetcher),
) -> AnalysisService:
    """
    Get analysis service instance.

    Returns:
        AnalysisService: GitHub, resume and portfolio analysis orchestrator
    """
    return AnalysisService(
        aggregation=aggregation,
        agent=agent,
        github_client=github_client,
        portfolio_fetcher=portfolio_fetcher,
    )


def get_skill_service(
    aggregation: AggregationService = Depends(get_aggregation_service),
    agent: CareerAgent = Depends(get_career_agent),
) -> SkillService:
    return SkillService(aggregation=aggregation, agent=agent)


def get_chat_service(
    store: SessionStore = Depends(get_session_store),
    agent: CareerAgent = Depends(get_career_agent),
) -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Chat service with the shared career agent
    """
    return ChatService(store=store, agent=agent)


def get_resume_builder_service(
    store: SessionStore = Depends(get_session_store),
    agent: CareerAgent = Depends(get_career_agent),
) -> ResumeBuilderService:
    return ResumeBuilderService(store=store, agent=agent)
