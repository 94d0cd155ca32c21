"""
Session domain models and schemas.

The session record is the root aggregate; every analysis writes one
top-level field of it.

Dependencies: pydantic
System role: Session record and session API contracts
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from careervalid.models.chat import ChatMessageRecord
from careervalid.models.common import CamelModel
from careervalid.models.github import GitHubData
from careervalid.models.portfolio import PortfolioData
from careervalid.models.resume import ResumeData
from careervalid.models.skill import ManualSkill

# Fields an update may replace; id, session_id and created_at are fixed at creation.
MUTABLE_SESSION_FIELDS = frozenset(
    {"github_data", "resume_data", "portfolio_data", "manual_skills", "insights"}
)


class SessionRecord(CamelModel):
    """Stored session aggregate."""

    model_config = ConfigDict(frozen=True)

    id: int
    session_id: str
    github_data: GitHubData | None = None
    resume_data: ResumeData | None = None
    portfolio_data: PortfolioData | None = None
    manual_skills: list[ManualSkill] | None = None
    insights: dict[str, str] | None = None
    created_at: datetime


class InitSessionRequest(CamelModel):
    """Request schema for session initialization."""

    session_id: str | None = Field(default=None, description="Client-held session id")


class SessionDetailResponse(CamelModel):
    """Session record with its chat log."""

    session: SessionRecord
    chat_messages: list[ChatMessageRecord]


class SessionExport(SessionDetailResponse):
    """Downloadable snapshot of a session."""

    exported_at: datetime
