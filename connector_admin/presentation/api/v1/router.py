"""V1 API router: aggregates the data service endpoints under /api/v1."""

from fastapi import APIRouter

from connector_admin.presentation.api.v1.endpoints.health import router as health_router
from connector_admin.presentation.api.v1.endpoints.data import router as data_router
from connector_admin.presentation.api.v1.endpoints.users import router as users_router
from connector_admin.presentation.api.v1.endpoints.connectors import router as connectors_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(data_router)
router.include_router(users_router)
router.include_router(connectors_router)
