import json

from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from ..core.errors import describe_errors
from ..integrations.solar_api import SolarApiClient
from ..models.forecast import RunRequest
from ..services.environment_service import EnvironmentService
from ..services.forecasting_service import ForecastService
from ..services.health_service import HealthService
from ..services.session_service import SessionService


def get_upstream(request: Request) -> SolarApiClient:
    """Returns the upstream client the app was built with."""
    return request.app.state.upstream


async def get_run_request(request: Request) -> RunRequest:
    """Parses the /run body as JSON whatever Content-Type the caller sent."""
    raw = await request.body()
    try:
        return RunRequest.model_validate_json(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to parse request body: {describe_errors(exc.errors())}",
        ) from exc


async def get_override(request: Request) -> dict:
    """Reads the optional override map of a run-with-env call.

    An empty body (or JSON ``null``) means no overrides.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body",
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body",
        )
    return data


def get_health_service(upstream: SolarApiClient = Depends(get_upstream)) -> HealthService:
    return HealthService(upstream)


def get_forecast_service(upstream: SolarApiClient = Depends(get_upstream)) -> ForecastService:
    return ForecastService(upstream)


def get_environment_service(upstream: SolarApiClient = Depends(get_upstream)) -> EnvironmentService:
    return EnvironmentService(upstream)


def get_session_service(upstream: SolarApiClient = Depends(get_upstream)) -> SessionService:
    return SessionService(upstream)
