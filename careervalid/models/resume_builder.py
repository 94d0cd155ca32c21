"""
Resume builder models and schemas.

Dependencies: pydantic
System role: Resume generation contracts
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator, model_validator

from careervalid.models.common import CamelModel

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class LanguageProficiency(str, Enum):
    """Spoken language proficiency levels."""

    BASIC = "Basic"
    CONVERSATIONAL = "Conversational"
    FLUENT = "Fluent"
    NATIVE = "Native"


class ContactInfo(CamelModel):
    """Contact block shown in the resume header."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value


class ProfessionalLinks(CamelModel):
    """Links shown in the resume header."""

    portfolio: str | None = None
    linkedin: str | None = None
    github: str | None = None


class EducationEntry(CamelModel):
    institution: str
    degree: str
    field: str | None = None
    graduation_year: str | None = None
    gpa: str | None = None


class Certification(CamelModel):
    name: str
    issuer: str | None = None
    issue_date: str | None = None
    expiry_date: str | None = None
    credential_id: str | None = None


class Award(CamelModel):
    title: str
    issuer: str | None = None
    date: str | None = None
    description: str | None = None


class SpokenLanguage(CamelModel):
    language: str
    proficiency: LanguageProficiency


class ResumeBuildRequest(CamelModel):
    """Request schema for AI resume generation."""

    session_id: str = Field(min_length=1)
    target_role: str = Field(description="Role the resume is tailored to")
    additional_info: str | None = None
    contact_info: ContactInfo | None = None
    professional_links: ProfessionalLinks | None = None
    education: list[EducationEntry] | None = None
    certifications: list[Certification] | None = None
    awards: list[Award] | None = None
    languages: list[SpokenLanguage] | None = None
    include_github_data: bool = True
    include_skills_data: bool = True
    include_portfolio_data: bool = True

    @model_validator(mode="before")
    @classmethod
    def drop_empty_email(cls, data):
        """Treat an empty contact email as absent."""
        if isinstance(data, dict):
            contact = data.get("contactInfo", data.get("contact_info"))
            if isinstance(contact, dict) and contact.get("email") == "":
                contact = {key: val for key, val in contact.items() if key != "email"}
                key = "contactInfo" if "contactInfo" in data else "contact_info"
                data = {**data, key: contact}
        return data


class BuiltResume(CamelModel):
    """Generated resume returned to the client; never stored."""

    target_role: str
    html: str
    additional_info: str | None = None
    contact_info: ContactInfo | None = None
    professional_links: ProfessionalLinks | None = None
    education: list[EducationEntry] | None = None
    certifications: list[Certification] | None = None
    awards: list[Award] | None = None
    languages: list[SpokenLanguage] | None = None
    include_github_data: bool = True
    include_skills_data: bool = True
    include_portfolio_data: bool = True
    generated_at: datetime


class ResumeBuildResponse(CamelModel):
    success: bool = True
    resume: BuiltResume
