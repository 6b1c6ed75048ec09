"""Pydantic DTOs for the user endpoints (backend wire shape)."""

from pydantic import BaseModel, Field

from connector_admin.domain.entities import UserRole


class UserWrite(BaseModel):
    """Schema for creating or replacing a user. ``role`` defaults server-side."""

    full_name: str = Field(..., min_length=1, max_length=200, examples=["Jane Doe"])
    email: str = Field(..., min_length=3, max_length=320, examples=["jane.doe@example.com"])
    role: UserRole | None = Field(None, examples=["manager"])


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    full_name: str
    email: str
    role: str | None
    created_at: str | None
