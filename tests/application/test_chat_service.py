"""
Test suite for ChatService.

Tests cover:
- Message processing flow
- Context built from session analyses
- Error handling
"""

import pytest

from careervalid.application.services.chat_service import ChatService, build_chat_context
from careervalid.core.exceptions import SessionNotFoundError, UpstreamError


@pytest.fixture
def chat_service(session_store, mock_career_agent) -> ChatService:
    """Create ChatService with a real store and mocked agent."""
    return ChatService(store=session_store, agent=mock_career_agent)


class TestChatServiceProcessChat:
    """Test suite for ChatService.process_chat method."""

    @pytest.mark.asyncio
    async def test_process_chat_success(
        self, chat_service, session_store, mock_career_agent, session_id
    ) -> None:
        # Arrange
        await session_store.create(session_id)

        # Act
        record = await chat_service.process_chat(session_id, "What should I learn next?")

        # Assert
        assert record.response == "Keep building projects!"
        assert record.message == "What should I learn next?"
        mock_career_agent.chat.assert_awaited_once()
        history = await chat_service.get_history(session_id)
        assert [m.id for m in history] == [record.id]

    @pytest.mark.asyncio
    async def test_context_contains_session_analyses(
        self, chat_service, session_store, mock_career_agent, session_id
    ) -> None:
        await session_store.create(session_id)
        await session_store.update(session_id, {"insights": {"skills": "x"}})

        await chat_service.process_chat(session_id, "Hi")

        message, context = mock_career_agent.chat.await_args.args
        assert message == "Hi"
        assert set(context) == {"githubData", "resumeData", "portfolioData", "manualSkills"}

    @pytest.mark.asyncio
    async def test_session_not_found(self, chat_service, mock_career_agent) -> None:
        with pytest.raises(SessionNotFoundError):
            await chat_service.process_chat("missing", "Hi")

        mock_career_agent.chat.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_agent_failure_stores_nothing(
        self, chat_service, session_store, mock_career_agent, session_id
    ) -> None:
        await session_store.create(session_id)
        mock_career_agent.chat.side_effect = UpstreamError("down", service="gemini")

        with pytest.raises(UpstreamError):
            await chat_service.process_chat(session_id, "Hi")

        assert await session_store.get_chat_messages(session_id) == []


class TestChatServiceHistory:
    @pytest.mark.asyncio
    async def test_history_of_unknown_session_raises(self, chat_service) -> None:
        with pytest.raises(SessionNotFoundError):
            await chat_service.get_history("missing")


@pytest.mark.asyncio
async def test_build_chat_context_uses_camel_case(session_store) -> None:
    session = await session_store.create("s1")

    context = build_chat_context(session)

    assert context == {
        "githubData": None,
        "resumeData": None,
        "portfolioData": None,
        "manualSkills": None,
    }
