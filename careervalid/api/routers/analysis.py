"""
Analysis API endpoints.

Routes:
- POST /analyze/github - Analyze a GitHub profile
- POST /analyze/resume - Analyze extracted resume text
- POST /analyze/portfolio - Analyze a portfolio website

Dependencies: careervalid.application.services.analysis_service
System role: Analysis HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from careervalid.api.deps import get_analysis_service
from careervalid.application.services.analysis_service import AnalysisService
from careervalid.models.common import SuccessResponse
from careervalid.models.github import GitHubAnalysisRequest, GitHubData
from careervalid.models.portfolio import PortfolioAnalysisRequest, PortfolioData
from careervalid.models.resume import ResumeAnalysisRequest, ResumeData

from .error_handling import handle_career_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["analysis"])


@router.post("/github", response_model=SuccessResponse[GitHubData])
@handle_career_errors("Failed to analyze GitHub profile")
async def analyze_github(
    request: GitHubAnalysisRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> SuccessResponse[GitHubData]:
    """
    Analyze a GitHub profile and store it on the session.

    Raises:
        400: Invalid profile URL
        404: Session not found
        500: GitHub or AI service failure
    """
    github_data = await analysis_service.analyze_github(
        session_id=request.session_id,
        profile_url=request.profile_url,
        token=request.token,
    )
    return SuccessResponse[GitHubData](data=github_data)


@router.post("/resume", response_model=SuccessResponse[ResumeData])
@handle_career_errors("Failed to analyze resume")
async def analyze_resume(
    request: ResumeAnalysisRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> SuccessResponse[ResumeData]:
    """
    Analyze resume text and store it on the session.

    Raises:
        404: Session not found
        500: AI service failure
    """
    resume_data = await analysis_service.analyze_resume(
        session_id=request.session_id,
        file_name=request.file_name,
        file_type=request.file_type,
        file_content=request.file_content,
    )
    return SuccessResponse[ResumeData](data=resume_data)


@router.post("/portfolio", response_model=SuccessResponse[PortfolioData])
@handle_career_errors("Failed to analyze portfolio")
async def analyze_portfolio(
    request: PortfolioAnalysisRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> SuccessResponse[PortfolioData]:
    """
    Analyze a portfolio website and store it on the session.

    Raises:
        404: Session not found
        500: Portfolio site or AI service failure
    """
    portfolio_data = await analysis_service.analyze_portfolio(
        session_id=request.session_id,
        portfolio_url=request.portfolio_url,
    )
    return SuccessResponse[PortfolioData](data=portfolio_data)
