"""
Resume builder API endpoints.

Routes:
- POST /resume/build - Generate a resume for a target role

Dependencies: careervalid.application.services.resume_builder_service
System role: Resume generation HTTP API
"""

from fastapi import APIRouter, Depends

from careervalid.api.deps import get_resume_builder_service
from careervalid.application.services.resume_builder_service import ResumeBuilderService
from careervalid.models.resume_builder import ResumeBuildRequest, ResumeBuildResponse

from .error_handling import handle_career_errors

router = APIRouter(prefix="/resume", tags=["resume"])


@router.post("/build", response_model=ResumeBuildResponse)
@handle_career_errors("Failed to build resume")
async def build_resume(
    request: ResumeBuildRequest,
    resume_service: ResumeBuilderService = Depends(get_resume_builder_service),
) -> ResumeBuildResponse:
    """
    Generate a resume from the session's analyses.

    Raises:
        400: Blank target role
        404: Session not found
        500: AI service failure
    """
    resume = await resume_service.build_resume(request)
    return ResumeBuildResponse(resume=resume)
