from fastapi import HTTPException, status

from ..integrations.solar_api import SolarApiClient, UpstreamError
from ..models.session import DeleteSessionResponse, SessionsResponse


class SessionService:
    def __init__(self, upstream: SolarApiClient) -> None:
        self.upstream = upstream

    def list_sessions(self) -> SessionsResponse:
        try:
            return self.upstream.fetch("GET", "/sessions", SessionsResponse)
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get sessions: {exc}",
            ) from exc

    def delete_session(self, session_id: str) -> DeleteSessionResponse:
        if not session_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="session_id is required",
            )

        try:
            response = self.upstream.send("DELETE", f"/sessions/{session_id}")
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to delete session: {exc}",
            ) from exc

        if response.status_code == 200:
            return DeleteSessionResponse(message="Session deleted successfully", status="success")

        if response.status_code == 404:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Failed to delete session: session not found: {session_id}",
            )

        if response.status_code == 500:
            reason = f"server error while deleting session: {session_id}"
        else:
            reason = f"unexpected status code: {response.status_code}"
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete session: {reason}",
        )
