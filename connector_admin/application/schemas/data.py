"""Pydantic DTO for the whole-document endpoint."""

from pydantic import BaseModel

from .connector import ConnectorResponse
from .user import UserResponse


class AppDataResponse(BaseModel):
    """Both collections at once, as the dashboard loads them."""

    users: list[UserResponse]
    connectors: list[ConnectorResponse]
