"""Chat API endpoints.

Routes:
- POST /chat - Send a message to the career assistant

Dependencies: careervalid.application.services.chat_service
System role: Chat messaging HTTP API
"""

from fastapi import APIRouter, Depends

from careervalid.api.deps import get_chat_service
from careervalid.application.services.chat_service import ChatService
from careervalid.models.chat import ChatRequest, ChatResponse

from .error_handling import handle_career_errors

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
@handle_career_errors("Failed to process chat message")
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send a chat message; the exchange is appended to the session's chat log.

    Raises:
        404: Session not found
        500: AI service failure
    """
    record = await chat_service.process_chat(
        session_id=request.session_id,
        message=request.message,
    )
    return ChatResponse(response=record.response)
