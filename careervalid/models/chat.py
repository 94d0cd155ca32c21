"""
Chat domain models and schemas.

Dependencies: pydantic
System role: Chat API contracts and chat log record
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from careervalid.models.common import CamelModel


class ChatMessageRecord(CamelModel):
    """One exchange in a session's append-only chat log."""

    model_config = ConfigDict(frozen=True)

    id: int
    session_id: str
    message: str
    response: str
    timestamp: datetime


class ChatRequest(CamelModel):
    """Request schema for chat messages."""

    session_id: str = Field(min_length=1)
    message: str = Field(min_length=1, description="User question or message")


class ChatResponse(CamelModel):
    """Response schema for chat messages."""

    success: bool = True
    response: str
