"""
Session service orchestrator.

Coordinates session lifecycle operations: get-or-create, read-back with
chat log, and export.

Dependencies: careervalid.boundary.store, careervalid.models
System role: Session use case orchestration
"""

import logging
import secrets
import string
import time
from datetime import datetime, timezone

from careervalid.boundary.store import SessionStore
from careervalid.core.exceptions import SessionNotFoundError
from careervalid.models.session import SessionDetailResponse, SessionExport, SessionRecord

logger = logging.getLogger(__name__)

SESSION_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
SESSION_SUFFIX_LENGTH = 9


def generate_session_id() -> str:
    """Generate a fallback session id: session_<epoch ms>_<9 base36 chars>."""
    suffix = "".join(
        secrets.choice(SESSION_SUFFIX_ALPHABET) for _ in range(SESSION_SUFFIX_LENGTH)
    )
    return f"session_{int(time.time() * 1000)}_{suffix}"


class SessionService:
    """Session service orchestrator."""

    def __init__(self, store: SessionStore) -> None:
        """
        Initialize session service.

        Args:
            store: Session store shared by every request
        """
        self.store = store

    async def init_session(self, session_id: str | None = None) -> SessionRecord:
        """
        Get an existing session or create it.

        Args:
            session_id: Client-held id; a new one is generated when absent

        Returns:
            SessionRecord: Existing or newly created session
        """
        session_id = session_id or generate_session_id()

        session = await self.store.get(session_id)
        if session is None:
            session = await self.store.create(session_id)
            logger.info("Created session", extra={"session_id": session_id})
        return session

    async def get_session(self, session_id: str) -> SessionRecord:
        """
        Get session by ID.

        Raises:
            SessionNotFoundError: If session not found
        """
        session = await self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    async def get_session_detail(self, session_id: str) -> SessionDetailResponse:
        """Get a session together with its chat log."""
        session = await self.get_session(session_id)
        chat_messages = await self.store.get_chat_messages(session_id)
        return SessionDetailResponse(session=session, chat_messages=chat_messages)

    async def export_session(self, session_id: str) -> SessionExport:
        """Snapshot a session and its chat log for download."""
        detail = await self.get_session_detail(session_id)
        return SessionExport(
            session=detail.session,
            chat_messages=detail.chat_messages,
            exported_at=datetime.now(timezone.utc),
        )
