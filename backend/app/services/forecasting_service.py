from typing import Any, Dict

from fastapi import HTTPException, status

from ..integrations.solar_api import SolarApiClient, UpstreamError
from ..models.forecast import RunRequest, RunResponse, RunWithEnvResponse


class ForecastService:
    def __init__(self, upstream: SolarApiClient) -> None:
        self.upstream = upstream

    def run_forecast(self, payload: RunRequest) -> RunResponse:
        try:
            return self.upstream.fetch(
                "POST",
                "/run",
                RunResponse,
                json=payload.model_dump(by_alias=True),
                echo_body=True,
            )
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to run forecast: {exc}",
            ) from exc

    def run_with_env(self, session_id: str, override: Dict[str, Any]) -> RunWithEnvResponse:
        if not session_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="session_id is required",
            )

        try:
            return self.upstream.fetch(
                "POST",
                f"/run-with-env/{session_id}",
                RunWithEnvResponse,
                # no overrides still sends an explicit empty object
                json=override or {},
                echo_body=True,
            )
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"RunWithEnv failed: {exc}",
            ) from exc
