from typing import Optional

from fastapi import APIRouter, Depends

from ..models.environment import SampleEnvResponse, UploadEnvResponse
from ..services.environment_service import EnvironmentService
from .dependencies import get_environment_service


router = APIRouter(tags=["environment"])


@router.post("/upload-env", response_model=UploadEnvResponse)
def upload_env(
    envfile: Optional[str] = None,
    service: EnvironmentService = Depends(get_environment_service),
) -> UploadEnvResponse:
    """Uploads a local .env file to the forecasting service, creating a session."""
    return service.upload_env(envfile)


@router.get("/sample-env", response_model=SampleEnvResponse)
def sample_env(service: EnvironmentService = Depends(get_environment_service)) -> SampleEnvResponse:
    return service.sample_env()
