"""
Resume analysis models and schemas.

Dependencies: pydantic
System role: Resume analysis contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from careervalid.models.common import CamelModel


class ResumeFileType(str, Enum):
    """Supported uploaded resume formats."""

    PDF = "pdf"
    DOCX = "docx"


class ResumeData(CamelModel):
    """Resume analysis stored as the session's resumeData."""

    file_name: str
    file_type: ResumeFileType
    insights: str
    score: int
    analyzed_at: datetime


class ResumeAnalysisRequest(CamelModel):
    """Request schema for resume analysis of client-extracted text."""

    session_id: str = Field(min_length=1)
    file_content: str = Field(min_length=1, description="Text extracted from the file")
    file_name: str = Field(min_length=1)
    file_type: ResumeFileType


class ResumeScoreAssessment(BaseModel):
    """Structured score requested from the model alongside the narrative."""

    score: int = Field(ge=0, le=100, description="Overall resume score out of 100")
