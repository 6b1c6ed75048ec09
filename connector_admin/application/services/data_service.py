"""Application service (use case) for the local JSON data source.

Works on backend wire-shape dicts so the REST routes and the local-file
gateway share one implementation. Every operation is a read-modify-write of
the whole document.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from connector_admin.application.interfaces import Document, DocumentStore
from connector_admin.domain.entities import BASELINE_ROLE
from connector_admin.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)

_LABELS = {"users": "User", "connectors": "Connector"}


def _next_id(items: list[dict[str, Any]]) -> int:
    ids = [item["id"] for item in items if isinstance(item.get("id"), int)]
    return max(ids, default=0) + 1


def _index_of(items: list[dict[str, Any]], record_id: int) -> int | None:
    for index, item in enumerate(items):
        if item.get("id") == record_id:
            return index
    return None


class DataService:
    """Orchestrates user and connector CRUD over a DocumentStore."""

    def __init__(self, store: DocumentStore):
        self._store = store

    async def read_all(self) -> Document:
        return await self._store.read()

    async def list_records(self, collection: str) -> list[dict[str, Any]]:
        document = await self._store.read()
        return document[collection]

    async def create_record(self, collection: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Add a record, assigning its id (and timestamp/role defaults for users)."""
        document = await self._store.read()
        items = document[collection]

        record = dict(payload)
        if collection == "connectors":
            yazaki_pn = record.get("yazaki_pn")
            if any(item.get("yazaki_pn") == yazaki_pn for item in items):
                raise DuplicateEntityError("Connector", "yazaki_pn", str(yazaki_pn))
        elif collection == "users":
            record["role"] = record.get("role") or BASELINE_ROLE.value
            record["created_at"] = datetime.now(timezone.utc).isoformat()

        record["id"] = _next_id(items)
        items.append(record)
        await self._store.write(document)
        logger.info("Created %s id=%s", _LABELS[collection], record["id"])
        return record

    async def update_record(
        self, collection: str, record_id: int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """Replace a record wholesale, keeping its id and immutable fields."""
        document = await self._store.read()
        items = document[collection]
        index = _index_of(items, record_id)
        if index is None:
            raise EntityNotFoundError(_LABELS[collection], record_id)

        existing = items[index]
        record = dict(payload)
        record["id"] = record_id
        if collection == "connectors":
            record["yazaki_pn"] = existing.get("yazaki_pn")
        elif collection == "users":
            record["role"] = record.get("role") or BASELINE_ROLE.value
            record["created_at"] = existing.get("created_at")

        items[index] = record
        await self._store.write(document)
        logger.info("Updated %s id=%s", _LABELS[collection], record_id)
        return record

    async def delete_record(self, collection: str, record_id: int) -> None:
        document = await self._store.read()
        items = document[collection]
        index = _index_of(items, record_id)
        if index is None:
            raise EntityNotFoundError(_LABELS[collection], record_id)

        del items[index]
        await self._store.write(document)
        logger.info("Deleted %s id=%s", _LABELS[collection], record_id)
