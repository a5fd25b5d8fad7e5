from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..models.forecast import RunRequest, RunResponse, RunWithEnvResponse
from ..services.forecasting_service import ForecastService
from .dependencies import get_forecast_service, get_override, get_run_request


router = APIRouter(tags=["forecast"])


@router.post(
    "/run",
    response_model=RunResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": RunRequest.model_json_schema(by_alias=True)}},
        }
    },
)
def run_forecast(
    payload: RunRequest = Depends(get_run_request),
    service: ForecastService = Depends(get_forecast_service),
) -> RunResponse:
    return service.run_forecast(payload)


@router.post("/run-with-env/{session_id:path}", response_model=RunWithEnvResponse)
def run_with_env(
    session_id: str,
    override: Dict[str, Any] = Depends(get_override),
    service: ForecastService = Depends(get_forecast_service),
) -> RunWithEnvResponse:
    """Runs a forecast against a previously uploaded environment session.

    The request body, if any, is a JSON object of parameter overrides.
    """
    return service.run_with_env(session_id, override)
