"""
Resume builder service.

Generates resume HTML for a target role from the session's analyses and
user-supplied sections. Generated resumes are returned, not stored.

Dependencies: careervalid.boundary.store, careervalid.core.agentic_system
System role: Resume generation use case orchestration
"""

import logging
from datetime import datetime, timezone

from careervalid.boundary.store import SessionStore
from careervalid.core.agentic_system.career_agent import CareerAgent
from careervalid.core.agentic_system.career_agent.career_agent import to_prompt_json
from careervalid.core.exceptions import SessionNotFoundError, ValidationError
from careervalid.models.resume_builder import BuiltResume, ResumeBuildRequest
from careervalid.models.session import SessionRecord

logger = logging.getLogger(__name__)

TOP_LANGUAGES = 5
TOP_REPOSITORIES = 5


def _dump_list(items) -> str:
    return to_prompt_json([item.model_dump(mode="json", by_alias=True) for item in items or []])


def build_analyzed_data_section(session: SessionRecord, request: ResumeBuildRequest) -> str:
    """Render the analyzed-data block honoring the include flags."""
    lines = []
    github = session.github_data
    if request.include_github_data and github is not None:
        lines.append(f"GitHub Stats: {to_prompt_json(github.stats.model_dump(by_alias=True))}")
        lines.append(f"Top Languages: {_dump_list(github.language_stats[:TOP_LANGUAGES])}")
        lines.append(f"Top Repositories: {_dump_list(github.repositories[:TOP_REPOSITORIES])}")
    if request.include_skills_data:
        lines.append(f"Manual Skills: {_dump_list(session.manual_skills)}")
    if request.include_portfolio_data and session.portfolio_data is not None:
        portfolio = session.portfolio_data.model_dump(mode="json", by_alias=True)
        lines.append(f"Portfolio: {to_prompt_json(portfolio)}")
    return "\n".join(lines) or "None available"


class ResumeBuilderService:
    """Resume generation orchestrator."""

    def __init__(self, store: SessionStore, agent: CareerAgent) -> None:
        self.store = store
        self.agent = agent

    async def build_resume(self, request: ResumeBuildRequest) -> BuiltResume:
        """
        Generate a resume.

        Args:
            request: Validated builder request

        Returns:
            BuiltResume: Generated HTML plus the echoed inputs

        Raises:
            ValidationError: If the target role is blank
            SessionNotFoundError: If the session does not exist
            UpstreamError: If the AI service fails
        """
        target_role = request.target_role.strip()
        if not target_role:
            raise ValidationError("Target role is required", field="targetRole")

        session = await self.store.get(request.session_id)
        if session is None:
            raise SessionNotFoundError(request.session_id)

        def dump(value) -> str:
            if value is None:
                return to_prompt_json({})
            return to_prompt_json(value.model_dump(mode="json", by_alias=True, exclude_none=True))

        logger.info(
            "Building resume",
            extra={"session_id": request.session_id, "target_role": target_role},
        )
        html = await self.agent.build_resume(
            target_role=target_role,
            contact_info=dump(request.contact_info),
            professional_links=dump(request.professional_links),
            analyzed_data=build_analyzed_data_section(session, request),
            education=_dump_list(request.education),
            certifications=_dump_list(request.certifications),
            awards=_dump_list(request.awards),
            languages=_dump_list(request.languages),
            additional_info=request.additional_info or "None provided",
        )

        return BuiltResume(
            target_role=target_role,
            html=html,
            additional_info=request.additional_info,
            contact_info=request.contact_info,
            professional_links=request.professional_links,
            education=request.education,
            certifications=request.certifications,
            awards=request.awards,
            languages=request.languages,
            include_github_data=request.include_github_data,
            include_skills_data=request.include_skills_data,
            include_portfolio_data=request.include_portfolio_data,
            generated_at=datetime.now(timezone.utc),
        )
