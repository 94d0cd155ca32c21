"""
Manual skill domain models and schemas.

Dependencies: pydantic
System role: Skill submission contracts and stored skill record
"""

from datetime import datetime
from enum import Enum

from pydantic import ConfigDict, Field, field_validator

from careervalid.models.common import CamelModel


class YearsExperience(str, Enum):
    """Ordered experience brackets."""

    ZERO_TO_ONE = "0-1"
    ONE_TO_TWO = "1-2"
    TWO_TO_THREE = "2-3"
    THREE_PLUS = "3+"


class UsageType(str, Enum):
    """Context in which a skill was used."""

    PERSONAL_PROJECT = "Personal Project"
    WORK_EXPERIENCE = "Work Experience"
    OPEN_SOURCE = "Open Source"
    LEARNING = "Learning"


class ManualSkill(CamelModel):
    """A manually declared skill as stored in the session."""

    model_config = ConfigDict(frozen=True)

    skill_name: str
    years_experience: YearsExperience
    usage_type: UsageType
    confidence_level: int = Field(ge=1, le=10)
    proficiency_score: int = Field(ge=0, le=100)
    added_at: datetime


class AddSkillRequest(CamelModel):
    """Request schema for adding a manual skill."""

    session_id: str = Field(min_length=1)
    skill_name: str = Field(min_length=1, description="Skill name, unique per session")
    years_experience: YearsExperience
    usage_type: UsageType
    confidence_level: int = Field(ge=1, le=10, description="Self-reported confidence")

    @field_validator("skill_name")
    @classmethod
    def strip_skill_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Skill name is required")
        return value


class AddSkillResponse(CamelModel):
    """Response schema for skill addition."""

    success: bool = True
    skills: list[ManualSkill]
    insights: str
