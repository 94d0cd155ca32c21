"""
Request correlation ids.

CorrelationMiddleware binds one id per request; every log record emitted
while the request is served carries it. A caller-supplied
X-Correlation-ID is reused so ids can span client and server logs.

Dependencies: contextvars
System role: Request tracing across async boundaries
"""

import uuid
from contextvars import ContextVar, Token

MAX_CORRELATION_ID_LENGTH = 64

_correlation_id: ContextVar[str | None] = ContextVar("careervalid_correlation_id", default=None)


def bind_correlation_id(incoming: str | None = None) -> tuple[str, Token]:
    """
    Bind the correlation id for the current request context.

    Args:
        incoming: Header value sent by the caller, if any

    Returns:
        tuple: (bound id, token for reset_correlation_id)
    """
    correlation_id = (incoming or "").strip()[:MAX_CORRELATION_ID_LENGTH] or uuid.uuid4().hex
    return correlation_id, _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token) -> None:
    _correlation_id.reset(token)


def current_correlation_id() -> str | None:
    """Return the id bound to the current context, or None outside a request."""
    return _correlation_id.get()
