"""
Error handling utilities for API endpoints.

Maps the CareerValid exception hierarchy to `{success: false, error}`
responses so every endpoint fails the same way.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from careervalid.core.exceptions import (
    SessionNotFoundError,
    UpstreamError,
    ValidationError,
)
from careervalid.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

RETRY_HINT = "Please try again."


def error_response(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, details=details).model_dump(),
    )


def handle_career_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory mapping domain errors to HTTP responses.

    - ValidationError (incl. DuplicateSkillError) -> 400 with its message
    - SessionNotFoundError -> 404
    - UpstreamError and anything unexpected -> 500 with `failure_message`

    Args:
        failure_message: Generic message returned for 500 responses
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except ValidationError as e:
                logger.warning(
                    "Invalid request",
                    extra={"endpoint": func.__name__, "error": str(e)},
                )
                field = e.details.get("field")
                return error_response(
                    status.HTTP_400_BAD_REQUEST,
                    e.message,
                    {"field": field} if field else None,
                )

            except SessionNotFoundError as e:
                logger.warning(
                    "Session not found",
                    extra={"endpoint": func.__name__, "session_id": e.session_id},
                )
                return error_response(status.HTTP_404_NOT_FOUND, "Session not found")

            except UpstreamError as e:
                logger.error(
                    "Upstream service failure",
                    extra={"endpoint": func.__name__, "service": e.service, "error": str(e)},
                )
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    f"{failure_message}. {RETRY_HINT}",
                )

            except Exception as e:
                logger.exception(
                    "Unexpected failure",
                    extra={"endpoint": func.__name__, "error": str(e)},
                )
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    f"{failure_message}. {RETRY_HINT}",
                )

        return wrapper  # type: ignore

    return decorator


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn schema validation failures into 400 responses."""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
        }
        for error in exc.errors()
    ]
    first = errors[0] if errors else {"loc": [], "msg": "Invalid request"}
    location = ".".join(part for part in first["loc"] if part != "body")
    message = f"{location}: {first['msg']}" if location else first["msg"]

    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message, {"errors": errors})
