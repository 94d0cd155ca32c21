"""
Analysis service orchestrator.

Runs the GitHub, resume and portfolio analyses: checks the session,
gathers raw facts from the external collaborators, asks the career agent
for narrative, and hands the results to the aggregation service. Nothing
is stored unless every step succeeds.

Dependencies: careervalid.boundary, careervalid.core.agentic_system,
    careervalid.application.services.aggregation_service
System role: Analysis use case orchestration
"""

import logging

from careervalid.application.services.aggregation_service import (
    AggregationService,
    build_github_data,
)
from careervalid.boundary.github import GitHubClient, extract_username
from careervalid.boundary.web import PortfolioFetcher
from careervalid.core.agentic_system.career_agent import CareerAgent
from careervalid.models.github import GitHubData
from careervalid.models.portfolio import PortfolioData
from careervalid.models.resume import ResumeData, ResumeFileType

logger = logging.getLogger(__name__)


class AnalysisService:
    """Analysis service orchestrator."""

    def __init__(
        self,
        aggregation: AggregationService,
        agent: CareerAgent,
        github_client: GitHubClient,
        portfolio_fetcher: PortfolioFetcher,
    ) -> None:
        self.aggregation = aggregation
        self.agent = agent
        self.github_client = github_client
        self.portfolio_fetcher = portfolio_fetcher

    async def analyze_github(
        self,
        session_id: str,
        profile_url: str,
        token: str | None = None,
    ) -> GitHubData:
        """
        Analyze a GitHub profile and store it as githubData.

        Args:
            session_id: Session key
            profile_url: GitHub profile URL
            token: Optional GitHub token

        Returns:
            GitHubData: Stored analysis

        Raises:
            ValidationError: If the URL carries no valid username
            SessionNotFoundError: If the session does not exist
            UpstreamError: If GitHub or the AI service fails
        """
        username = extract_username(profile_url)
        await self.aggregation.require_session(session_id)

        logger.info(
            "Analyzing GitHub profile",
            extra={"session_id": session_id, "username": username},
        )
        profile, repositories = await self.github_client.fetch_user_and_repos(
            username, token=token
        )
        insights = await self.agent.analyze_github(profile, repositories)

        github_data = build_github_data(profile, repositories, insights)
        return await self.aggregation.record_github(session_id, github_data)

    async def analyze_resume(
        self,
        session_id: str,
        file_name: str,
        file_type: ResumeFileType,
        file_content: str,
    ) -> ResumeData:
        """
        Analyze extracted resume text and store it as resumeData.

        Raises:
            SessionNotFoundError: If the session does not exist
            UpstreamError: If the AI service fails
        """
        await self.aggregation.require_session(session_id)

        logger.info(
            "Analyzing resume",
            extra={"session_id": session_id, "file_name": file_name, "chars": len(file_content)},
        )
        insights = await self.agent.analyze_resume(file_name, file_content)
        structured_score = await self.agent.score_resume(file_name, file_content)

        return await self.aggregation.record_resume(
            session_id,
            file_name=file_name,
            file_type=file_type,
            insights=insights,
            structured_score=structured_score,
        )

    async def analyze_portfolio(self, session_id: str, portfolio_url: str) -> PortfolioData:
        """
        Analyze a portfolio website and store it as portfolioData.

        Raises:
            SessionNotFoundError: If the session does not exist
            UpstreamError: If the site or the AI service fails
        """
        await self.aggregation.require_session(session_id)

        logger.info(
            "Analyzing portfolio",
            extra={"session_id": session_id, "url": portfolio_url},
        )
        page = await self.portfolio_fetcher.fetch(portfolio_url)
        insights = await self.agent.analyze_portfolio(
            url=portfolio_url,
            title=page.title,
            description=page.description,
            content_preview=page.content_preview,
        )

        return await self.aggregation.record_portfolio(
            session_id,
            url=portfolio_url,
            title=page.title,
            description=page.description,
            insights=insights,
        )
