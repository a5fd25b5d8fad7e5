from fastapi import APIRouter, Depends

from ..models.session import DeleteSessionResponse, SessionsResponse
from ..services.session_service import SessionService
from .dependencies import get_session_service


router = APIRouter(tags=["sessions"])


@router.get("/sessions", response_model=SessionsResponse)
def list_sessions(service: SessionService = Depends(get_session_service)) -> SessionsResponse:
    return service.list_sessions()


@router.delete("/sessions/{session_id:path}", response_model=DeleteSessionResponse)
def delete_session(
    session_id: str,
    service: SessionService = Depends(get_session_service),
) -> DeleteSessionResponse:
    return service.delete_session(session_id)
