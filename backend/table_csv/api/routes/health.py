"""Health check endpoints."""

from fastapi import APIRouter, Depends

from table_csv.api.deps import get_app_settings
from table_csv.core.config import Settings
from table_csv.schemas.conversion import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(status="ok", app_name=settings.app_name, environment=settings.environment)
