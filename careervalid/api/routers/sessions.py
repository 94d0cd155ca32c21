"""
Session API endpoints.

Routes:
- POST /session - Get or create session
- GET /session/{session_id} - Get session with chat log
- GET /session/{session_id}/export - Download session snapshot

Dependencies: careervalid.application.services.session_service, careervalid.models
System role: Session management HTTP API
"""

import logging
import re

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from careervalid.api.deps import get_session_service
from careervalid.application.services.session_service import SessionService
from careervalid.models.session import (
    InitSessionRequest,
    SessionDetailResponse,
    SessionRecord,
)

from .error_handling import handle_career_errors

logger = logging.getLogger(__name__)

# Session ids are opaque; only these characters reach the download filename
UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def export_filename(session_id: str) -> str:
    safe_id = UNSAFE_FILENAME_CHARS.sub("_", session_id)
    return f"careervalid-session-{safe_id}.json"


router = APIRouter(prefix="/session", tags=["sessions"])


@router.post("", response_model=SessionRecord)
@handle_career_errors("Failed to manage session")
async def init_session(
    request: InitSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> SessionRecord:
    """
    Get or create a session.

    Args:
        request: InitSessionRequest with optional client-held sessionId
        session_service: Injected SessionService

    Returns:
        SessionRecord: Existing or created session
    """
    return await session_service.init_session(request.session_id)


@router.get("/{session_id}", response_model=SessionDetailResponse)
@handle_career_errors("Failed to get session data")
async def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> SessionDetailResponse:
    """
    Get a session and its chat log.

    Raises:
        404: Session not found
    """
    return await session_service.get_session_detail(session_id)


@router.get("/{session_id}/export")
@handle_career_errors("Failed to export session data")
async def export_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> JSONResponse:
    """
    Export a session as a downloadable JSON file.

    Raises:
        404: Session not found
    """
    export = await session_service.export_session(session_id)
    return JSONResponse(
        content=export.model_dump(mode="json", by_alias=True),
        headers={
            "Content-Disposition": (
                f'attachment; filename="{export_filename(session_id)}"'
            ),
        },
    )
