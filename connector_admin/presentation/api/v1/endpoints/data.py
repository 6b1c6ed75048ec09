"""Whole-document endpoint used for the dashboard's initial load."""

from fastapi import APIRouter, Depends

from connector_admin.application.schemas import AppDataResponse
from connector_admin.application.services import DataService
from connector_admin.infrastructure.dependencies import get_data_service

router = APIRouter(tags=["Data"])


@router.get("/data", response_model=AppDataResponse)
async def read_data(
    service: DataService = Depends(get_data_service),
) -> AppDataResponse:
    """Both collections at once."""
    return AppDataResponse.model_validate(await service.read_all())
