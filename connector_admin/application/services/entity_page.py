"""Per-kind management page: list view, edit form and delete, wired to the store."""

import logging
from collections.abc import Callable
from typing import Any

from connector_admin.application.entity_kinds import EntityKind
from connector_admin.application.interfaces import AttachmentUploader, DataGateway
from connector_admin.application.services.edit_form import EditForm
from connector_admin.application.services.entity_store import EntityStore
from connector_admin.application.services.list_view import (
    DEFAULT_PAGE_SIZE,
    ListView,
    ListViewState,
    derive_view,
    filter_options,
)
from connector_admin.domain.exceptions import DataServiceError, IdentityError

logger = logging.getLogger(__name__)


class EntityPage:
    """Controller behind the Users and Connectors pages.

    The store is reconciled only after the gateway confirms an operation.
    Once ``close()`` has been called the page is torn down: late results
    still reach the store, which outlives the page, but the page's own
    view state (error, current page) is left untouched.
    """

    def __init__(
        self,
        kind: EntityKind,
        store: EntityStore,
        gateway: DataGateway,
        *,
        uploader: AttachmentUploader | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._kind = kind
        self._store = store
        self._gateway = gateway
        self._page_size = page_size
        self._closed = False
        self.state = ListViewState()
        self.form = EditForm(kind, gateway, store, uploader)
        self.error: str | None = None

    @property
    def kind(self) -> EntityKind:
        return self._kind

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ── Derived view ────────────────────────────────────────────────

    def view(self) -> ListView:
        return derive_view(
            self._kind,
            self._store.records(self._kind),
            self.state.search_text,
            self.state.active_filter,
            self.state.page,
            self._page_size,
        )

    def filter_options(self) -> list[str]:
        return filter_options(self._kind, self._store.records(self._kind))

    def set_search(self, text: str) -> None:
        self.state.set_search_text(text)

    def set_filter(self, value: str | None) -> None:
        self.state.set_filter(value)

    def go_to_page(self, page: int) -> None:
        self.state.go_to_page(page)

    # ── Actions ─────────────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch the collection and replace the store's copy."""
        try:
            records = await self._gateway.list_records(self._kind)
        except DataServiceError as exc:
            self._report(exc, "load")
            raise
        self._store.reconcile_list(self._kind, records)
        if not self._closed:
            self.error = None
            self.state.clamp(self.view().total_pages)

    def open_form(self, record: Any | None = None) -> dict[str, Any]:
        return self.form.open_for(record)

    def close_form(self) -> None:
        self.form.close()

    async def submit_form(self) -> Any:
        """Submit the open form and reconcile the store with the saved record."""
        editing = self.form.original
        saved = await self.form.submit()
        if editing is None:
            if self._closed and self._store.find(self._kind, saved.id) is not None:
                # A reload after close already brought the new record in
                self._store.reconcile_replace(self._kind, saved.id, saved)
            else:
                self._store.reconcile_insert(self._kind, saved)
        else:
            identity = editing.id if editing.id is not None else saved.id
            self._reconcile_late(self._store.reconcile_replace, identity, saved)
        if not self._closed:
            self.error = None
        return saved

    async def delete(self, record: Any) -> None:
        """Delete ``record`` through the gateway, then drop it from the store."""
        try:
            identity = self._store.resolve_identity(self._kind, record)
            await self._gateway.delete_record(self._kind, identity)
        except DataServiceError as exc:
            self._report(exc, "delete")
            raise
        self._reconcile_late(self._store.reconcile_remove, identity)
        if not self._closed:
            self.error = None
            self.state.clamp(self.view().total_pages)

    def close(self) -> None:
        """Tear the page down (navigation away)."""
        self._closed = True
        self.form.close()

    def _reconcile_late(self, reconcile: Callable[..., None], identity: int, *args: Any) -> None:
        """Apply a reconcile call; on a closed page a record already gone is skipped."""
        try:
            reconcile(self._kind, identity, *args)
        except IdentityError:
            if not self._closed:
                raise
            logger.debug(
                "%s id %s left the store before a late result arrived", self._kind.label, identity
            )

    def _report(self, exc: DataServiceError, action: str) -> None:
        logger.warning("Could not %s %s: %s", action, self._kind.name, exc)
        if not self._closed:
            self.error = str(exc)
