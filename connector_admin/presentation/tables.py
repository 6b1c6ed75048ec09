"""Table cell rendering for the Users and Connectors lists."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from connector_admin.application.entity_kinds import CONNECTORS, USERS, EntityKind
from connector_admin.domain.entities import Connector, User
from connector_admin.infrastructure.storage.media_paths import media_url

EMPTY_CELL = "—"

ROLE_BADGE_CLASSES: dict[str, str] = {
    "admin": "bg-red-100 text-red-800",
    "manager": "bg-blue-100 text-blue-800",
    "user": "bg-green-100 text-green-800",
}
_DEFAULT_BADGE = "bg-gray-100 text-gray-800"

USER_COLUMNS = ("ID", "Name", "Email", "Role", "Created")
CONNECTOR_COLUMNS = ("Image", "Yazaki PN", "Customer PN", "Supplier PN", "Supplier Name", "Price")


def format_price(price: float | None) -> str:
    if price is None:
        return EMPTY_CELL
    return f"${price:.2f}"


def format_date(value: str | None) -> str:
    """``2024-03-05T10:00:00Z`` becomes ``Mar 5, 2024``; unparseable text is shown as-is."""
    if not value:
        return EMPTY_CELL
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def role_badge_class(role: str | None) -> str:
    return ROLE_BADGE_CLASSES.get(role or "", _DEFAULT_BADGE)


def user_row(user: User) -> dict[str, str]:
    return {
        "ID": str(user.id) if user.id is not None else EMPTY_CELL,
        "Name": user.name,
        "Email": user.email,
        "Role": user.role,
        "Created": format_date(user.created_at),
    }


def connector_row(connector: Connector, backend_url: str) -> dict[str, str]:
    return {
        "Image": media_url(backend_url, connector.image_path) or EMPTY_CELL,
        "Yazaki PN": connector.yazaki_pn,
        "Customer PN": connector.customer_pn,
        "Supplier PN": connector.supplier_pn,
        "Supplier Name": connector.supplier_name,
        "Price": format_price(connector.price),
    }


def render_rows(kind: EntityKind, records: Iterable[Any], backend_url: str = "") -> list[dict[str, str]]:
    """Cell text for each record on the current page."""
    if kind is USERS:
        return [user_row(r) for r in records]
    if kind is CONNECTORS:
        return [connector_row(r, backend_url) for r in records]
    raise ValueError(f"No table layout for {kind.name}")
