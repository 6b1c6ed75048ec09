"""Entity kind descriptors: everything that differs between users and connectors.

The list view, edit form, store and gateways are written once against an
``EntityKind``. Each kind carries its field mapping table between the
UI shape (the domain dataclass) and the backend wire shape (JSON keys).

Null handling is declared per field in the table and nowhere else:

* a field without converters passes ``None`` through unchanged in both
  directions;
* ``role`` coalesces a missing/null wire value to the baseline role and
  lower-cases the backend's casing;
* ``price`` keeps ``None`` as ``None`` and never turns it into ``0``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from connector_admin.domain.entities import (
    ATTACHMENT_SLOTS,
    BASELINE_ROLE,
    AttachmentSlot,
    Connector,
    User,
    UserRole,
)


@dataclass(frozen=True)
class FieldMapping:
    """One row of a mapping table."""

    attribute: str
    wire_key: str
    # Wire value must not be null when reading a backend record.
    required: bool = False
    from_wire: Callable[[Any], Any] | None = None
    to_wire: Callable[[Any], Any] | None = None


@dataclass(frozen=True)
class EntityKind:
    """Descriptor for one record type managed by the dashboard."""

    name: str                       # collection name and URL segment
    label: str                      # singular, for messages
    record_type: type
    fields: tuple[FieldMapping, ...]
    search_fields: tuple[str, ...]
    filter_field: str
    required_fields: tuple[str, ...]
    natural_key: str | None = None  # locked in the edit form once created
    server_fields: tuple[str, ...] = ("id",)
    attachment_slots: tuple[AttachmentSlot, ...] = ()

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(f.attribute for f in self.fields)

    @property
    def editable_attributes(self) -> tuple[str, ...]:
        return tuple(a for a in self.attributes if a not in self.server_fields)


# ── Converters ───────────────────────────────────────────────────────


def _role_from_wire(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return BASELINE_ROLE.value
    if not isinstance(value, str):
        raise ValueError(f"role must be a string, got {type(value).__name__}")
    role = value.strip().lower()
    if role not in {r.value for r in UserRole}:
        raise ValueError(f"unknown role {value!r}")
    return role


def _role_to_wire(value: Any) -> str:
    if isinstance(value, UserRole):
        return value.value
    return value


def _price_from_wire(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("price must be a number, got a boolean")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value.strip():
        return float(value)
    raise ValueError(f"price must be a number, got {value!r}")


def _price_to_wire(value: Any) -> float | None:
    return None if value is None else float(value)


def _id_from_wire(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"id must be an integer, got {value!r}")
    return int(value)


# ── Kinds ────────────────────────────────────────────────────────────

USERS = EntityKind(
    name="users",
    label="User",
    record_type=User,
    fields=(
        FieldMapping("id", "id", from_wire=_id_from_wire),
        FieldMapping("name", "full_name", required=True),
        FieldMapping("email", "email", required=True),
        FieldMapping("role", "role", from_wire=_role_from_wire, to_wire=_role_to_wire),
        FieldMapping("created_at", "created_at"),
    ),
    search_fields=("name", "email"),
    filter_field="role",
    required_fields=("name", "email"),
    server_fields=("id", "created_at"),
)

CONNECTORS = EntityKind(
    name="connectors",
    label="Connector",
    record_type=Connector,
    fields=(
        FieldMapping("id", "id", from_wire=_id_from_wire),
        FieldMapping("yazaki_pn", "yazaki_pn", required=True),
        FieldMapping("customer_pn", "customer_pn", required=True),
        FieldMapping("supplier_pn", "supplier_pn", required=True),
        FieldMapping("supplier_name", "supplier_name", required=True),
        FieldMapping("name", "name"),
        FieldMapping("price", "price", from_wire=_price_from_wire, to_wire=_price_to_wire),
        FieldMapping("drawing_2d_path", "drawing_2d_path"),
        FieldMapping("model_3d_path", "model_3d_path"),
        FieldMapping("image_path", "image_path"),
    ),
    search_fields=("yazaki_pn", "customer_pn", "supplier_pn"),
    filter_field="supplier_name",
    required_fields=("yazaki_pn", "customer_pn", "supplier_pn", "supplier_name"),
    natural_key="yazaki_pn",
    attachment_slots=ATTACHMENT_SLOTS,
)

ENTITY_KINDS: dict[str, EntityKind] = {kind.name: kind for kind in (USERS, CONNECTORS)}
