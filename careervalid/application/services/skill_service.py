"""
Skill service orchestrator.

Adds manually declared skills: rejects duplicates, scores the skill, asks
the career agent for a narrative over the resulting skill set, then stores
both in one step.

Dependencies: careervalid.application.services.aggregation_service,
    careervalid.core.agentic_system
System role: Manual skill use case orchestration
"""

import logging

from careervalid.application.services.aggregation_service import (
    SKILLS_INSIGHT_KEY,
    AggregationService,
)
from careervalid.core.agentic_system.career_agent import CareerAgent
from careervalid.models.skill import AddSkillResponse, UsageType, YearsExperience

logger = logging.getLogger(__name__)


class SkillService:
    """Skill service orchestrator."""

    def __init__(self, aggregation: AggregationService, agent: CareerAgent) -> None:
        self.aggregation = aggregation
        self.agent = agent

    async def add_skill(
        self,
        session_id: str,
        skill_name: str,
        years_experience: YearsExperience,
        usage_type: UsageType,
        confidence_level: int,
    ) -> AddSkillResponse:
        """
        Add a manual skill to a session.

        Args:
            session_id: Session key
            skill_name: Skill name, unique per session case-insensitively
            years_experience: Experience bracket
            usage_type: Usage context
            confidence_level: Self-reported confidence in [1, 10]

        Returns:
            AddSkillResponse: Full stored skill list and the skills narrative

        Raises:
            SessionNotFoundError: If the session does not exist
            DuplicateSkillError: If the skill name already exists
            UpstreamError: If the AI service fails (nothing is stored)
        """
        session, skill = await self.aggregation.prepare_skill(
            session_id,
            skill_name=skill_name,
            years_experience=years_experience,
            usage_type=usage_type,
            confidence_level=confidence_level,
        )

        candidate_skills = [*(session.manual_skills or []), skill]
        insights = await self.agent.analyze_skills(
            [item.model_dump(mode="json", by_alias=True) for item in candidate_skills]
        )

        updated = await self.aggregation.record_skill(session_id, skill, insights)
        return AddSkillResponse(
            skills=updated.manual_skills or [],
            insights=(updated.insights or {}).get(SKILLS_INSIGHT_KEY, insights),
        )
