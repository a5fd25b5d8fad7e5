import logging
import os
from typing import Optional

from fastapi import HTTPException, status

from ..integrations.solar_api import SolarApiClient, UpstreamError
from ..models.environment import SampleEnvResponse, UploadEnvResponse


logger = logging.getLogger(__name__)


# The upstream service expects this exact form field and file name,
# whatever the local file is called.
ENV_FORM_FIELD = "env_file"
ENV_UPLOAD_FILENAME = "params.env"


class EnvironmentService:
    def __init__(self, upstream: SolarApiClient) -> None:
        self.upstream = upstream

    def upload_env(self, env_file: Optional[str]) -> UploadEnvResponse:
        if not env_file:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="envfile query parameter is required",
            )
        if not os.path.exists(env_file):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File does not exist: {env_file}",
            )

        try:
            with open(env_file, "rb") as handle:
                return self.upstream.fetch(
                    "POST",
                    "/upload-env",
                    UploadEnvResponse,
                    files={ENV_FORM_FIELD: (ENV_UPLOAD_FILENAME, handle)},
                    echo_body=True,
                )
        except OSError as exc:
            logger.warning("Could not read environment file %s: %s", env_file, exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to upload .env file: {exc}",
            ) from exc
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to upload .env file: {exc}",
            ) from exc

    def sample_env(self) -> SampleEnvResponse:
        try:
            return self.upstream.fetch("GET", "/sample-env", SampleEnvResponse)
        except UpstreamError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get sample env: {exc}",
            ) from exc
