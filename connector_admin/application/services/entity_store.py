"""Client-held record collections, changed only by reconciling gateway results."""

import logging
from typing import Any

from connector_admin.application.entity_kinds import ENTITY_KINDS, EntityKind
from connector_admin.domain.exceptions import IdentityError

logger = logging.getLogger(__name__)


class EntityStore:
    """Owner of the last-known-good collection for each entity kind.

    Collections are tuples and every reconcile call builds a new tuple and
    swaps it in with one assignment, so a failed call leaves the store as it
    was. ``version`` increases on every successful reconcile and can key
    memoised derivations.
    """

    def __init__(self, kinds: tuple[EntityKind, ...] | None = None):
        kinds = kinds or tuple(ENTITY_KINDS.values())
        self._collections: dict[str, tuple[Any, ...]] = {kind.name: () for kind in kinds}
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def records(self, kind: EntityKind) -> tuple[Any, ...]:
        return self._collections[kind.name]

    def count(self, kind: EntityKind) -> int:
        return len(self._collections[kind.name])

    def find(self, kind: EntityKind, identity: int | None) -> Any | None:
        if identity is None:
            return None
        for record in self._collections[kind.name]:
            if record.id == identity:
                return record
        return None

    def resolve_identity(self, kind: EntityKind, record: Any) -> int:
        """Return the surrogate id to address ``record`` with.

        A record without an id is looked up by natural key in the current
        collection; if that also fails the record cannot be addressed.
        """
        if record.id is not None:
            return record.id
        if kind.natural_key is not None:
            key = getattr(record, kind.natural_key)
            for stored in self._collections[kind.name]:
                if getattr(stored, kind.natural_key) == key and stored.id is not None:
                    return stored.id
            raise IdentityError(kind.label, key)
        raise IdentityError(kind.label, None)

    # ── Reconciliation ──────────────────────────────────────────────

    def reconcile_list(self, kind: EntityKind, records: list[Any]) -> None:
        """Replace the whole collection with a fresh list result."""
        self._commit(kind, tuple(records))

    def reconcile_insert(self, kind: EntityKind, record: Any) -> None:
        """Append a newly created record."""
        current = self._collections[kind.name]
        if record.id is not None and any(r.id == record.id for r in current):
            raise IdentityError(
                kind.label, record.id, f"{kind.label} id {record.id} is already in the store"
            )
        self._commit(kind, current + (record,))

    def reconcile_replace(self, kind: EntityKind, identity: int, record: Any) -> None:
        """Swap the record with ``identity`` for the server's version, in place."""
        current = self._collections[kind.name]
        updated = tuple(record if r.id == identity else r for r in current)
        if not any(r.id == identity for r in current):
            raise IdentityError(kind.label, identity)
        self._commit(kind, updated)

    def reconcile_remove(self, kind: EntityKind, identity: int) -> None:
        """Drop exactly the record with ``identity``, keeping the others' order."""
        current = self._collections[kind.name]
        remaining = tuple(r for r in current if r.id != identity)
        if len(remaining) == len(current):
            raise IdentityError(kind.label, identity)
        self._commit(kind, remaining)

    def _commit(self, kind: EntityKind, collection: tuple[Any, ...]) -> None:
        self._collections[kind.name] = collection
        self._version += 1
        logger.debug("Store %s now holds %d record(s)", kind.name, len(collection))
