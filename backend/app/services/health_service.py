from fastapi import HTTPException, status

from ..integrations.solar_api import SolarApiClient, UpstreamError
from ..models.health import HealthResponse


class HealthService:
    def __init__(self, upstream: SolarApiClient) -> None:
        self.upstream = upstream

    def check(self) -> HealthResponse:
        try:
            return self.upstream.fetch("GET", "/health", HealthResponse)
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Health check failed: {exc}",
            ) from exc
