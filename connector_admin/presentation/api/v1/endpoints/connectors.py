"""Connector CRUD endpoints backed by the local data file."""

from fastapi import APIRouter, Depends, HTTPException, status

from connector_admin.application.schemas import ConnectorResponse, ConnectorWrite
from connector_admin.application.services import DataService
from connector_admin.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from connector_admin.infrastructure.dependencies import get_data_service

router = APIRouter(prefix="/connectors", tags=["Connectors"])


@router.get("", response_model=list[ConnectorResponse])
async def list_connectors(
    service: DataService = Depends(get_data_service),
) -> list[ConnectorResponse]:
    """Every connector, in stored order."""
    records = await service.list_records("connectors")
    return [ConnectorResponse.model_validate(r) for r in records]


@router.post("", response_model=ConnectorResponse, status_code=status.HTTP_201_CREATED)
async def create_connector(
    data: ConnectorWrite,
    service: DataService = Depends(get_data_service),
) -> ConnectorResponse:
    """Create a connector; the Yazaki PN must not exist yet."""
    try:
        record = await service.create_record("connectors", data.model_dump())
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ConnectorResponse.model_validate(record)


@router.put("/{connector_id}", response_model=ConnectorResponse)
async def update_connector(
    connector_id: int,
    data: ConnectorWrite,
    service: DataService = Depends(get_data_service),
) -> ConnectorResponse:
    """Replace a connector by surrogate id. The Yazaki PN stays as stored."""
    try:
        record = await service.update_record("connectors", connector_id, data.model_dump())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ConnectorResponse.model_validate(record)


@router.delete("/{connector_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_connector(
    connector_id: int,
    service: DataService = Depends(get_data_service),
) -> None:
    """Delete a connector by surrogate id."""
    try:
        await service.delete_record("connectors", connector_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
