"""Health check endpoints."""

from fastapi import APIRouter, Depends

from bem.api.deps import get_app_settings
from bem.core.config import Settings

router = APIRouter()


@router.get("/health", tags=["system"])
def healthcheck(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """Readiness probe reporting the configured application."""

    return {"status": "ok", "app": settings.app_name, "environment": settings.environment}
