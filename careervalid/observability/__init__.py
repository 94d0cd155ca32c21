"""
Observability module.

Provides logging configuration, request correlation ids and request logging.
"""

from careervalid.observability.correlation import (
    bind_correlation_id,
    current_correlation_id,
    reset_correlation_id,
)
from careervalid.observability.logger import configure_logging

__all__ = [
    "bind_correlation_id",
    "configure_logging",
    "current_correlation_id",
    "reset_correlation_id",
]
