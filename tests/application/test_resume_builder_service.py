"""
Test suite for ResumeBuilderService.
"""

import pytest

from careervalid.application.services.aggregation_service import (
    AggregationService,
    build_github_data,
)
from careervalid.application.services.resume_builder_service import (
    ResumeBuilderService,
    build_analyzed_data_section,
)
from careervalid.core.exceptions import SessionNotFoundError, ValidationError
from careervalid.models.resume_builder import ResumeBuildRequest


@pytest.fixture
def resume_service(session_store, mock_career_agent) -> ResumeBuilderService:
    return ResumeBuilderService(store=session_store, agent=mock_career_agent)


@pytest.mark.asyncio
async def test_build_resume_returns_html_and_inputs(
    resume_service, session_store, mock_career_agent, session_id
) -> None:
    # Arrange
    await session_store.create(session_id)
    request = ResumeBuildRequest.model_validate(
        {
            "sessionId": session_id,
            "targetRole": "  Backend Engineer ",
            "contactInfo": {"name": "Jane Doe", "email": "jane@example.com"},
            "education": [{"institution": "MIT", "degree": "BSc"}],
        }
    )

    # Act
    resume = await resume_service.build_resume(request)

    # Assert
    assert resume.target_role == "Backend Engineer"
    assert resume.html == "<html><body>Resume</body></html>"
    assert resume.contact_info.email == "jane@example.com"
    sections = mock_career_agent.build_resume.await_args.kwargs
    assert sections["target_role"] == "Backend Engineer"
    assert "MIT" in sections["education"]
    assert sections["additional_info"] == "None provided"


@pytest.mark.asyncio
async def test_blank_target_role_is_rejected(resume_service, mock_career_agent) -> None:
    request = ResumeBuildRequest(session_id="missing", target_role="   ")

    with pytest.raises(ValidationError):
        await resume_service.build_resume(request)

    mock_career_agent.build_resume.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_session_raises(resume_service) -> None:
    request = ResumeBuildRequest(session_id="missing", target_role="Engineer")

    with pytest.raises(SessionNotFoundError):
        await resume_service.build_resume(request)


@pytest.mark.asyncio
async def test_include_flags_control_analyzed_data(
    session_store, github_profile, github_repositories
) -> None:
    await session_store.create("s1")
    await AggregationService(store=session_store).record_github(
        "s1", build_github_data(github_profile, github_repositories, "g")
    )
    session = await session_store.get("s1")

    included = build_analyzed_data_section(
        session, ResumeBuildRequest(session_id="s1", target_role="Engineer")
    )
    excluded = build_analyzed_data_section(
        session,
        ResumeBuildRequest(
            session_id="s1",
            target_role="Engineer",
            include_github_data=False,
            include_skills_data=False,
        ),
    )

    assert "Top Languages" in included
    assert excluded == "None available"
