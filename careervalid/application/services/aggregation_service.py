"""
Session aggregation service.

Decides what each analysis type writes into the session store. Every
analysis owns one disjoint top-level field, so analyses finishing in any
order never erase each other; manual skills are append-only and insights
are merged key by key.

Dependencies: careervalid.boundary.store, careervalid.core
System role: Reduction of raw analysis facts into the session aggregate
"""

import logging
from datetime import datetime, timezone
from typing import Any

from careervalid.boundary.store import SessionStore
from careervalid.core.exceptions import DuplicateSkillError, SessionNotFoundError
from careervalid.core.language_stats import aggregate_language_stats
from careervalid.core.narrative import DEFAULT_RESUME_SCORE, extract_resume_score
from careervalid.core.proficiency import calculate_proficiency_score
from careervalid.models.github import (
    GitHubData,
    GitHubProfile,
    GitHubRepository,
    GitHubStats,
)
from careervalid.models.portfolio import PortfolioData
from careervalid.models.resume import ResumeData, ResumeFileType
from careervalid.models.session import SessionRecord
from careervalid.models.skill import ManualSkill, UsageType, YearsExperience

logger = logging.getLogger(__name__)

SKILLS_INSIGHT_KEY = "skills"


def build_github_data(
    profile: dict[str, Any],
    repositories: list[dict[str, Any]],
    insights: str,
) -> GitHubData:
    """
    Compose the githubData object from raw GitHub payloads.

    Args:
        profile: GitHub user payload
        repositories: GitHub repository payloads
        insights: Narrative produced by the AI service

    Returns:
        GitHubData: Profile, repositories, narrative, language stats and totals
    """
    github_profile = GitHubProfile.model_validate(profile)
    github_repos = [GitHubRepository.model_validate(repo) for repo in repositories]

    total_repos = github_profile.public_repos
    if total_repos is None:
        total_repos = len(github_repos)

    stats = GitHubStats(
        total_repos=total_repos,
        total_stars=sum(repo.stargazers_count or 0 for repo in github_repos),
        total_forks=sum(repo.forks_count or 0 for repo in github_repos),
    )

    return GitHubData(
        profile=github_profile,
        repositories=github_repos,
        insights=insights,
        language_stats=aggregate_language_stats(github_repos),
        stats=stats,
    )


def resolve_resume_score(insights: str, structured_score: int | None) -> int:
    """
    Pick the resume score.

    Order: structured score from the model, then the first "<n>/100" or
    "<n> out of 100" in the narrative, then the fixed default.
    """
    if structured_score is not None:
        return structured_score

    extracted = extract_resume_score(insights)
    if extracted is not None:
        logger.warning(
            "Resume score taken from narrative text",
            extra={"score": extracted},
        )
        return extracted

    logger.warning(
        "No resume score found, using default",
        extra={"default_score": DEFAULT_RESUME_SCORE},
    )
    return DEFAULT_RESUME_SCORE


def find_duplicate_skill(session: SessionRecord, skill_name: str) -> ManualSkill | None:
    """Return the stored skill whose name matches case-insensitively, if any."""
    wanted = skill_name.strip().casefold()
    for skill in session.manual_skills or []:
        if skill.skill_name.casefold() == wanted:
            return skill
    return None


class AggregationService:
    """Writes analysis results into the session store."""

    def __init__(self, store: SessionStore) -> None:
        """
        Initialize aggregation service.

        Args:
            store: Session store shared by every request
        """
        self.store = store

    async def require_session(self, session_id: str) -> SessionRecord:
        """
        Get a session or fail.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = await self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    async def record_github(self, session_id: str, github_data: GitHubData) -> GitHubData:
        """Replace the session's githubData in full."""
        await self.store.update(session_id, {"github_data": github_data})
        logger.info(
            "Stored GitHub analysis",
            extra={
                "session_id": session_id,
                "repo_count": len(github_data.repositories),
                "language_count": len(github_data.language_stats),
            },
        )
        return github_data

    async def record_resume(
        self,
        session_id: str,
        file_name: str,
        file_type: ResumeFileType,
        insights: str,
        structured_score: int | None = None,
    ) -> ResumeData:
        """Replace the session's resumeData in full."""
        resume_data = ResumeData(
            file_name=file_name,
            file_type=file_type,
            insights=insights,
            score=resolve_resume_score(insights, structured_score),
            analyzed_at=datetime.now(timezone.utc),
        )
        await self.store.update(session_id, {"resume_data": resume_data})
        logger.info(
            "Stored resume analysis",
            extra={"session_id": session_id, "score": resume_data.score},
        )
        return resume_data

    async def record_portfolio(
        self,
        session_id: str,
        url: str,
        title: str,
        description: str,
        insights: str,
    ) -> PortfolioData:
        """Replace the session's portfolioData in full."""
        portfolio_data = PortfolioData(
            url=url,
            title=title,
            description=description,
            insights=insights,
            analyzed_at=datetime.now(timezone.utc),
        )
        await self.store.update(session_id, {"portfolio_data": portfolio_data})
        logger.info("Stored portfolio analysis", extra={"session_id": session_id})
        return portfolio_data

    async def prepare_skill(
        self,
        session_id: str,
        skill_name: str,
        years_experience: YearsExperience,
        usage_type: UsageType,
        confidence_level: int,
    ) -> tuple[SessionRecord, ManualSkill]:
        """
        Validate and score a skill submission without storing it.

        Returns:
            tuple: (current session, scored skill)

        Raises:
            SessionNotFoundError: If the session does not exist
            DuplicateSkillError: If the name already exists (case-insensitive)
        """
        session = await self.require_session(session_id)
        if find_duplicate_skill(session, skill_name) is not None:
            raise DuplicateSkillError(skill_name, session_id)

        skill = ManualSkill(
            skill_name=skill_name,
            years_experience=years_experience,
            usage_type=usage_type,
            confidence_level=confidence_level,
            proficiency_score=calculate_proficiency_score(
                years_experience, usage_type, confidence_level
            ),
            added_at=datetime.now(timezone.utc),
        )
        return session, skill

    async def record_skill(
        self,
        session_id: str,
        skill: ManualSkill,
        skills_insight: str,
    ) -> SessionRecord:
        """
        Append a skill and merge the skills narrative into insights.

        Reads the latest stored skills so a concurrent addition completed in
        the meantime is kept, and re-checks uniqueness against them.

        Raises:
            SessionNotFoundError: If the session does not exist
            DuplicateSkillError: If the name was added in the meantime
        """
        session = await self.require_session(session_id)
        if find_duplicate_skill(session, skill.skill_name) is not None:
            raise DuplicateSkillError(skill.skill_name, session_id)

        manual_skills = [*(session.manual_skills or []), skill]
        insights = {**(session.insights or {}), SKILLS_INSIGHT_KEY: skills_insight}

        updated = await self.store.update(
            session_id,
            {"manual_skills": manual_skills, "insights": insights},
        )
        logger.info(
            "Stored manual skill",
            extra={
                "session_id": session_id,
                "skill_name": skill.skill_name,
                "proficiency_score": skill.proficiency_score,
                "skill_count": len(manual_skills),
            },
        )
        return updated
