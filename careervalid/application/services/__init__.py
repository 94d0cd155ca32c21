"""Service orchestrators."""

from .aggregation_service import AggregationService
from .analysis_service import AnalysisService
from .chat_service import ChatService
from .resume_builder_service import ResumeBuilderService
from .session_service import SessionService
from .skill_service import SkillService

__all__ = [
    "AggregationService",
    "AnalysisService",
    "ChatService",
    "ResumeBuilderService",
    "SessionService",
    "SkillService",
]
