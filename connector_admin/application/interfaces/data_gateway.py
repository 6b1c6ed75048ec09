"""Abstract data gateway interface (port) for record CRUD against a data service."""

from abc import ABC, abstractmethod
from typing import Any

from connector_admin.application.entity_kinds import EntityKind


class DataGateway(ABC):
    """Port for reading and writing records: implemented in the infrastructure layer.

    Implementations map between the UI and wire shapes, never touch the
    entity store, and raise only ``DataServiceError`` subclasses.
    """

    @abstractmethod
    async def list_records(self, kind: EntityKind) -> list[Any]:
        """Return every record of the kind, in the order the source holds them."""
        ...

    @abstractmethod
    async def create_record(self, kind: EntityKind, draft: Any) -> Any:
        """Create a record and return the canonical stored version."""
        ...

    @abstractmethod
    async def update_record(self, kind: EntityKind, identity: int | None, draft: Any) -> Any:
        """Replace the record addressed by its surrogate id.

        Raises IdentityError before any I/O when ``identity`` is None.
        """
        ...

    @abstractmethod
    async def delete_record(self, kind: EntityKind, identity: int | None) -> None:
        """Delete the record addressed by its surrogate id."""
        ...
