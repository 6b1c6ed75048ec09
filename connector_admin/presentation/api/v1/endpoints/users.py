"""User CRUD endpoints backed by the local data file."""

from fastapi import APIRouter, Depends, HTTPException, status

from connector_admin.application.schemas import UserResponse, UserWrite
from connector_admin.application.services import DataService
from connector_admin.domain.exceptions import EntityNotFoundError
from connector_admin.infrastructure.dependencies import get_data_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: DataService = Depends(get_data_service),
) -> list[UserResponse]:
    """Every user, in stored order."""
    records = await service.list_records("users")
    return [UserResponse.model_validate(r) for r in records]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserWrite,
    service: DataService = Depends(get_data_service),
) -> UserResponse:
    """Create a user; id, creation time and a missing role are filled in."""
    record = await service.create_record("users", data.model_dump(mode="json"))
    return UserResponse.model_validate(record)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserWrite,
    service: DataService = Depends(get_data_service),
) -> UserResponse:
    """Replace a user's editable fields."""
    try:
        record = await service.update_record("users", user_id, data.model_dump(mode="json"))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(record)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    service: DataService = Depends(get_data_service),
) -> None:
    """Delete a user by id."""
    try:
        await service.delete_record("users", user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
