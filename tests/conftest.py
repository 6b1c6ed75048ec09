"""Shared fakes and sample data for the test suite."""

import asyncio
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

import pytest

from connector_admin.application.entity_kinds import USERS, EntityKind
from connector_admin.application.interfaces import AttachmentUploader, DataGateway
from connector_admin.domain.entities import Attachment, Connector, User
from connector_admin.domain.exceptions import DataServiceError, IdentityError
from tests.factories import make_user


# ── Fake Gateway ─────────────────────────────────────────────────────

class FakeGateway(DataGateway, AttachmentUploader):
    """In-memory gateway that records every call.

    Set ``fail_with`` to make the next calls raise, ``gate`` to an
    ``asyncio.Event`` to hold calls until the test releases them, or
    ``ack_gate`` to commit a write and then hold its response.
    """

    def __init__(self) -> None:
        self.records: dict[str, list[Any]] = {"users": [], "connectors": []}
        self.calls: list[tuple[str, str]] = []
        self.uploads: list[tuple[str, dict[str, Attachment]]] = []
        self.fail_with: DataServiceError | None = None
        self.gate: asyncio.Event | None = None
        self.ack_gate: asyncio.Event | None = None
        self._next_id = 100

    async def _acknowledge(self) -> None:
        if self.ack_gate is not None:
            await self.ack_gate.wait()

    async def _wait_or_fail(self) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            raise self.fail_with

    async def list_records(self, kind: EntityKind) -> list[Any]:
        self.calls.append(("list", kind.name))
        await self._wait_or_fail()
        return list(self.records[kind.name])

    async def create_record(self, kind: EntityKind, draft: Any) -> Any:
        self.calls.append(("create", kind.name))
        await self._wait_or_fail()
        record = replace(draft, id=self._next_id)
        self._next_id += 1
        if kind is USERS:
            record = replace(record, created_at="2024-06-01T09:30:00+00:00")
        self.records[kind.name].append(record)
        await self._acknowledge()
        return record

    async def update_record(self, kind: EntityKind, identity: int | None, draft: Any) -> Any:
        if identity is None:
            raise IdentityError(kind.label, identity)
        self.calls.append(("update", kind.name))
        await self._wait_or_fail()
        record = replace(draft, id=identity)
        items = self.records[kind.name]
        self.records[kind.name] = [record if r.id == identity else r for r in items]
        await self._acknowledge()
        return record

    async def delete_record(self, kind: EntityKind, identity: int | None) -> None:
        if identity is None:
            raise IdentityError(kind.label, identity)
        self.calls.append(("delete", kind.name))
        await self._wait_or_fail()
        self.records[kind.name] = [r for r in self.records[kind.name] if r.id != identity]
        await self._acknowledge()

    async def upload_attachments(
        self, base_filename: str, attachments: Mapping[str, Attachment]
    ) -> dict[str, str]:
        self.calls.append(("upload", base_filename))
        await self._wait_or_fail()
        self.uploads.append((base_filename, dict(attachments)))
        return {key: f"/uploads/{base_filename}/{a.filename}" for key, a in attachments.items()}


# ── Sample data ──────────────────────────────────────────────────────

@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def sample_users() -> list[User]:
    return [
        make_user(1, "admin", name="Alice Admin", email="alice@yazaki.com"),
        make_user(2, "manager", name="Bob Manager", email="bob@example.com"),
        make_user(3, "user", name="Carol User", email="carol@example.com"),
    ]


@pytest.fixture
def sample_connectors() -> list[Connector]:
    return [
        Connector(id=1, yazaki_pn="A1", customer_pn="C-A1", supplier_pn="S-A1", supplier_name="Acme", price=10),
        Connector(id=2, yazaki_pn="A2", customer_pn="C-A2", supplier_pn="S-A2", supplier_name="Acme", price=None),
        Connector(id=3, yazaki_pn="B1", customer_pn="C-B1", supplier_pn="S-B1", supplier_name="Beta", price=5),
    ]
