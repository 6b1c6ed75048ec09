"""Health check endpoint: reports which data backend the service is using."""

from fastapi import APIRouter

from connector_admin.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Current status plus the configured data backend."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "data_backend": settings.data_backend,
    }
