from fastapi import APIRouter, Depends

from ..models.health import HealthResponse
from ..services.health_service import HealthService
from .dependencies import get_health_service


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(service: HealthService = Depends(get_health_service)) -> HealthResponse:
    """Reports the health of the upstream forecasting service."""
    return service.check()
