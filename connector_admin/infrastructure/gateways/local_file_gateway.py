"""Local-file data gateway: the fallback when no backend is in use.

Calls the DataService in-process and maps records through the same tables
as the HTTP gateway, so the UI cannot tell the two apart.
"""

import logging
from typing import Any

from connector_admin.application.entity_kinds import EntityKind
from connector_admin.application.interfaces import DataGateway
from connector_admin.application.mapping import from_wire, list_from_wire, to_wire
from connector_admin.application.services.data_service import DataService
from connector_admin.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    IdentityError,
    ProtocolError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class LocalFileGateway(DataGateway):
    """Infrastructure adapter over the JSON document DataService."""

    def __init__(self, service: DataService):
        self._service = service

    async def list_records(self, kind: EntityKind) -> list[Any]:
        items = await self._service.list_records(kind.name)
        return list_from_wire(kind, items)

    async def create_record(self, kind: EntityKind, draft: Any) -> Any:
        payload = to_wire(kind, draft)
        for key in kind.server_fields:
            payload.pop(key, None)
        try:
            stored = await self._service.create_record(kind.name, payload)
        except DuplicateEntityError as exc:
            raise ValidationError(str(exc)) from exc
        return from_wire(kind, stored)

    async def update_record(self, kind: EntityKind, identity: int | None, draft: Any) -> Any:
        record_id = self._require_identity(kind, identity)
        try:
            stored = await self._service.update_record(kind.name, record_id, to_wire(kind, draft))
        except EntityNotFoundError as exc:
            raise ProtocolError(404, "Not Found", str(exc)) from exc
        return from_wire(kind, stored)

    async def delete_record(self, kind: EntityKind, identity: int | None) -> None:
        record_id = self._require_identity(kind, identity)
        try:
            await self._service.delete_record(kind.name, record_id)
        except EntityNotFoundError as exc:
            raise ProtocolError(404, "Not Found", str(exc)) from exc

    @staticmethod
    def _require_identity(kind: EntityKind, identity: int | None) -> int:
        if identity is None or isinstance(identity, bool) or not isinstance(identity, int):
            raise IdentityError(kind.label, identity)
        return identity
