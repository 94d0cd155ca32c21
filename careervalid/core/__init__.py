"""
Core business logic module.

Contains the proficiency scorer, the language distribution aggregator,
narrative extraction helpers and the exception hierarchy.
"""

from careervalid.core.exceptions import (
    CareerValidException,
    DuplicateSkillError,
    SessionNotFoundError,
    UpstreamError,
    ValidationError,
)
from careervalid.core.language_stats import aggregate_language_stats
from careervalid.core.proficiency import calculate_proficiency_score

__all__ = [
    # Exceptions
    "CareerValidException",
    "DuplicateSkillError",
    "SessionNotFoundError",
    "UpstreamError",
    "ValidationError",
    # Business logic
    "aggregate_language_stats",
    "calculate_proficiency_score",
]
