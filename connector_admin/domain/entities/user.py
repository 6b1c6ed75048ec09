"""Domain entity for dashboard users."""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """Fixed set of roles an admin can assign."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


BASELINE_ROLE = UserRole.USER


@dataclass(frozen=True)
class User:
    """A dashboard user as the UI sees it.

    ``id`` and ``created_at`` are assigned by the backend on create and never
    edited afterwards. ``created_at`` is kept as the ISO string the backend
    sent so that it round-trips unchanged.
    """

    name: str
    email: str
    role: str = BASELINE_ROLE.value
    id: int | None = None
    created_at: str | None = None
