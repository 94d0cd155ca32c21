"""
Session store.

Keyed storage for session aggregates and their chat logs. The abstract
interface is what services depend on; InMemorySessionStore is the
process-lifetime backing.

Operations never suspend between reading and writing a record, so under
asyncio's single-threaded scheduling each call is atomic.

Dependencies: careervalid.models, careervalid.core.exceptions
System role: Single source of truth for session state
"""

import itertools
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from careervalid.core.exceptions import SessionNotFoundError, ValidationError
from careervalid.models.chat import ChatMessageRecord
from careervalid.models.session import MUTABLE_SESSION_FIELDS, SessionRecord

logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Interface for session and chat message persistence."""

    @abstractmethod
    async def create(self, session_id: str) -> SessionRecord:
        """Create a fresh session, replacing any record under the same key."""

    @abstractmethod
    async def get(self, session_id: str) -> SessionRecord | None:
        """Return the session, or None when the key is unknown."""

    @abstractmethod
    async def update(self, session_id: str, fields: dict[str, Any]) -> SessionRecord:
        """Replace the given top-level fields and return the updated record."""

    @abstractmethod
    async def append_chat_message(
        self,
        session_id: str,
        message: str,
        response: str,
    ) -> ChatMessageRecord:
        """Append one exchange to the session's chat log."""

    @abstractmethod
    async def get_chat_messages(self, session_id: str) -> list[ChatMessageRecord]:
        """Return the chat log in insertion order."""


class InMemorySessionStore(SessionStore):
    """
    In-process session store.

    Records live only as long as the process. Session and chat message ids
    come from store-wide counters starting at 1.
    """

    def __init__(self) -> None:
        """Initialize empty session and chat message maps."""
        self._sessions: dict[str, SessionRecord] = {}
        self._chat_messages: dict[str, list[ChatMessageRecord]] = {}
        self._session_ids = itertools.count(1)
        self._message_ids = itertools.count(1)

    async def create(self, session_id: str) -> SessionRecord:
        """
        Create a session record.

        Callers check existence first; an existing record under the same key
        is overwritten and its chat log reset.

        Args:
            session_id: Client or server generated session key

        Returns:
            SessionRecord: New record with all optional fields absent
        """
        if not session_id:
            raise ValidationError("Session id is required", field="sessionId")

        record = SessionRecord(
            id=next(self._session_ids),
            session_id=session_id,
            created_at=datetime.now(timezone.utc),
        )
        if session_id in self._sessions:
            logger.warning(
                "Overwriting existing session",
                extra={"session_id": session_id},
            )
        self._sessions[session_id] = record
        self._chat_messages[session_id] = []
        return record

    async def get(self, session_id: str) -> SessionRecord | None:
        return self._sessions.get(session_id)

    async def update(self, session_id: str, fields: dict[str, Any]) -> SessionRecord:
        """
        Shallow-merge fields into a session.

        Each supplied field replaces the stored value wholesale; omitted
        fields keep their values. Nested objects are never merged.

        Args:
            session_id: Session key
            fields: Field name (snake_case) to new value

        Returns:
            SessionRecord: Updated record

        Raises:
            SessionNotFoundError: If the session does not exist
            ValidationError: If a field is unknown or immutable
        """
        existing = self._sessions.get(session_id)
        if existing is None:
            raise SessionNotFoundError(session_id)

        invalid = sorted(set(fields) - MUTABLE_SESSION_FIELDS)
        if invalid:
            raise ValidationError(
                f"Cannot update session fields: {', '.join(invalid)}",
                details={"session_id": session_id},
            )

        # Untouched fields keep their existing objects; supplied ones are validated
        merged = {**dict(existing), **fields}
        updated = SessionRecord.model_validate(merged)
        self._sessions[session_id] = updated
        return updated

    async def append_chat_message(
        self,
        session_id: str,
        message: str,
        response: str,
    ) -> ChatMessageRecord:
        """
        Append a chat exchange.

        Args:
            session_id: Session key
            message: User message
            response: Assistant reply

        Returns:
            ChatMessageRecord: Stored record with the next global id

        Raises:
            SessionNotFoundError: If the session has no chat log
        """
        messages = self._chat_messages.get(session_id)
        if messages is None:
            raise SessionNotFoundError(session_id)

        record = ChatMessageRecord(
            id=next(self._message_ids),
            session_id=session_id,
            message=message,
            response=response,
            timestamp=datetime.now(timezone.utc),
        )
        messages.append(record)
        return record

    async def get_chat_messages(self, session_id: str) -> list[ChatMessageRecord]:
        return list(self._chat_messages.get(session_id, []))
