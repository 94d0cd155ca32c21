"""
Chat service for the career assistant.

Validates the session, asks the career agent for a reply grounded in the
session's analyses, and appends the exchange to the chat log.

Dependencies: careervalid.boundary.store, careervalid.core.agentic_system
System role: Chat service orchestration layer
"""

import logging
from typing import Any

from careervalid.boundary.store import SessionStore
from careervalid.core.agentic_system.career_agent import CareerAgent
from careervalid.core.exceptions import SessionNotFoundError
from careervalid.models.chat import ChatMessageRecord
from careervalid.models.session import SessionRecord

logger = logging.getLogger(__name__)


def build_chat_context(session: SessionRecord) -> dict[str, Any]:
    """Collect the analyses the assistant may use."""
    dumped = session.model_dump(mode="json", by_alias=True)
    return {
        "githubData": dumped.get("githubData"),
        "resumeData": dumped.get("resumeData"),
        "portfolioData": dumped.get("portfolioData"),
        "manualSkills": dumped.get("manualSkills"),
    }


class ChatService:
    """
    Chat service for conversational career advice.

    Coordinates session validation, agent invocation and chat log writes.
    """

    def __init__(self, store: SessionStore, agent: CareerAgent) -> None:
        """
        Initialize chat service.

        Args:
            store: Session store shared by every request
            agent: Career agent for replies
        """
        self.store = store
        self.agent = agent

    async def process_chat(self, session_id: str, message: str) -> ChatMessageRecord:
        """
        Process a chat message.

        Flow:
        1. Validate session exists
        2. Build context from the session's analyses
        3. Invoke the career agent
        4. Append message and reply to the chat log

        Args:
            session_id: Session key
            message: User's message

        Returns:
            ChatMessageRecord: Stored exchange

        Raises:
            SessionNotFoundError: If session does not exist
            UpstreamError: If the AI service fails (nothing is stored)
        """
        session = await self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        response = await self.agent.chat(message, build_chat_context(session))

        record = await self.store.append_chat_message(session_id, message, response)
        logger.info(
            "Stored chat message",
            extra={"session_id": session_id, "message_id": record.id},
        )
        return record

    async def get_history(self, session_id: str) -> list[ChatMessageRecord]:
        """
        Get a session's chat log in insertion order.

        Raises:
            SessionNotFoundError: If session does not exist
        """
        if await self.store.get(session_id) is None:
            raise SessionNotFoundError(session_id)
        return await self.store.get_chat_messages(session_id)
