"""
Manual skills API endpoints.

Routes:
- POST /skills/add - Add a manually declared skill

Dependencies: careervalid.application.services.skill_service
System role: Skill management HTTP API
"""

from fastapi import APIRouter, Depends

from careervalid.api.deps import get_skill_service
from careervalid.application.services.skill_service import SkillService
from careervalid.models.skill import AddSkillRequest, AddSkillResponse

from .error_handling import handle_career_errors

router = APIRouter(prefix="/skills", tags=["skills"])


@router.post("/add", response_model=AddSkillResponse)
@handle_career_errors("Failed to add skill")
async def add_skill(
    request: AddSkillRequest,
    skill_service: SkillService = Depends(get_skill_service),
) -> AddSkillResponse:
    """
    Add a skill to the session.

    Raises:
        400: Duplicate skill name or invalid input
        404: Session not found
        500: AI service failure
    """
    return await skill_service.add_skill(
        session_id=request.session_id,
        skill_name=request.skill_name,
        years_experience=request.years_experience,
        usage_type=request.usage_type,
        confidence_level=request.confidence_level,
    )
