"""Edit form state: a private draft of one record and its submission."""

import logging
import math
from dataclasses import asdict, replace
from typing import Any

from connector_admin.application.entity_kinds import EntityKind
from connector_admin.application.interfaces import AttachmentUploader, DataGateway
from connector_admin.application.services.entity_store import EntityStore
from connector_admin.domain.entities import BASELINE_ROLE, Attachment, UserRole
from connector_admin.domain.exceptions import (
    DataServiceError,
    SubmitInProgressError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_ROLES = frozenset(r.value for r in UserRole)


class EditForm:
    """Draft, validation and single in-flight submit for one entity kind.

    The form never writes to the store. ``submit`` hands the canonical record
    back and the caller reconciles. Every ``open_for``/``close`` starts a new
    session; a submit that completes after its session ended returns its
    result but leaves the current form state alone.

    Usage:
        form = EditForm(CONNECTORS, gateway, store, uploader)
        form.open_for(existing)
        form.set_field("price", "12.50")
        saved = await form.submit()
    """

    def __init__(
        self,
        kind: EntityKind,
        gateway: DataGateway,
        store: EntityStore,
        uploader: AttachmentUploader | None = None,
    ):
        self._kind = kind
        self._gateway = gateway
        self._store = store
        self._uploader = uploader
        self._session = 0
        self._pending_session: int | None = None
        self._is_open = False
        self._original: Any | None = None
        self._draft: dict[str, Any] = {}
        self._attachments: dict[str, Attachment] = {}
        self.error: str | None = None

    # ── State ───────────────────────────────────────────────────────

    @property
    def kind(self) -> EntityKind:
        return self._kind

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_pending(self) -> bool:
        """True while this session's submit is awaiting the gateway."""
        return self._pending_session == self._session

    @property
    def is_editing(self) -> bool:
        return self._original is not None

    @property
    def original(self) -> Any | None:
        return self._original

    @property
    def draft(self) -> dict[str, Any]:
        return dict(self._draft)

    @property
    def attachments(self) -> dict[str, Attachment]:
        return dict(self._attachments)

    def is_locked(self, attribute: str) -> bool:
        """Whether the field is shown but not editable."""
        return self.is_editing and attribute == self._kind.natural_key

    # ── Lifecycle ───────────────────────────────────────────────────

    def open_for(self, record: Any | None = None) -> dict[str, Any]:
        """Start editing ``record``, or a blank record when None. Returns the draft."""
        self._session += 1
        self._is_open = True
        self._original = record
        self._attachments = {}
        self.error = None
        if record is None:
            self._draft = self._blank_draft()
        else:
            values = asdict(record)
            self._draft = {a: values[a] for a in self._kind.editable_attributes}
        return self.draft

    def close(self) -> None:
        self._session += 1
        self._is_open = False
        self._original = None
        self._draft = {}
        self._attachments = {}
        self.error = None

    def set_field(self, attribute: str, value: Any) -> None:
        if not self._is_open:
            raise ValidationError("The form is not open")
        if attribute not in self._kind.editable_attributes:
            raise ValidationError(f"{self._kind.label} has no editable field '{attribute}'")
        if self.is_locked(attribute):
            raise ValidationError(f"'{attribute}' cannot be changed after creation")
        self._draft[attribute] = value

    def attach(self, slot_key: str, attachment: Attachment) -> None:
        if not self._is_open:
            raise ValidationError("The form is not open")
        if slot_key not in {slot.key for slot in self._kind.attachment_slots}:
            raise ValidationError(f"{self._kind.label} has no attachment slot '{slot_key}'")
        self._attachments[slot_key] = attachment

    def detach(self, slot_key: str) -> None:
        self._attachments.pop(slot_key, None)

    # ── Validation ──────────────────────────────────────────────────

    def validate(self) -> Any:
        """Build the record the draft describes, or raise ValidationError."""
        draft = self._draft
        missing = [
            name for name in self._kind.required_fields
            if draft.get(name) is None or not str(draft.get(name)).strip()
        ]
        if missing:
            raise ValidationError(f"Required field(s) missing: {', '.join(missing)}")

        values: dict[str, Any] = {}
        for attribute in self._kind.editable_attributes:
            value = draft.get(attribute)
            if attribute == "price":
                value = _parse_price(value)
            elif attribute == "role":
                value = _parse_role(value)
            elif value == "" and attribute not in self._kind.required_fields:
                value = None
            values[attribute] = value

        if self._original is not None:
            for attribute in self._kind.server_fields:
                values[attribute] = getattr(self._original, attribute)
            if self._kind.natural_key is not None:
                values[self._kind.natural_key] = getattr(self._original, self._kind.natural_key)

        try:
            return self._kind.record_type(**values)
        except (TypeError, ValueError) as exc:
            raise ValidationError(str(exc)) from exc

    # ── Submit ──────────────────────────────────────────────────────

    async def submit(self) -> Any:
        """Validate, upload attachments, then create or update through the gateway.

        On success the form closes and the canonical record is returned. On
        failure the message is kept in ``error``, the form stays open with
        its draft, and the exception propagates.
        """
        if self.is_pending:
            raise SubmitInProgressError()
        if not self._is_open:
            raise ValidationError("The form is not open")

        session = self._session
        original = self._original
        self._pending_session = session
        self.error = None
        try:
            record = self.validate()
            if self._attachments:
                record = await self._upload_attachments(record, session)
            if original is None:
                saved = await self._gateway.create_record(self._kind, record)
            else:
                identity = self._store.resolve_identity(self._kind, original)
                saved = await self._gateway.update_record(self._kind, identity, record)
        except DataServiceError as exc:
            if session == self._session:
                self.error = str(exc)
            logger.warning("Saving %s failed: %s", self._kind.label, exc)
            raise
        finally:
            if self._pending_session == session:
                self._pending_session = None

        if session == self._session:
            self.close()
        else:
            logger.debug("%s form closed while saving; result not applied to it", self._kind.label)
        return saved

    async def _upload_attachments(self, record: Any, session: int) -> Any:
        if self._uploader is None:
            raise ValidationError("File attachments need a backend that accepts uploads")

        if self._kind.natural_key is not None:
            base_filename = str(getattr(record, self._kind.natural_key))
        else:
            base_filename = str(record.id)
        paths = await self._uploader.upload_attachments(base_filename, dict(self._attachments))

        updates = {
            slot.attribute: paths[slot.key]
            for slot in self._kind.attachment_slots
            if slot.key in paths
        }
        if session == self._session:
            # Uploaded files live in the draft from now on; a retry won't re-send them
            self._draft.update(updates)
            for key in paths:
                self._attachments.pop(key, None)
        return replace(record, **updates)

    def _blank_draft(self) -> dict[str, Any]:
        draft: dict[str, Any] = {}
        for attribute in self._kind.editable_attributes:
            if attribute == "role":
                draft[attribute] = BASELINE_ROLE.value
            elif attribute in self._kind.required_fields:
                draft[attribute] = ""
            else:
                draft[attribute] = None
        return draft


def _parse_price(value: Any) -> float | None:
    """Empty means "no price", which is not the same as 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError("Price must be a number")
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Price must be a number, got {value!r}") from None
    if not math.isfinite(price):
        raise ValidationError("Price must be a finite number")
    if price < 0:
        raise ValidationError("Price cannot be negative")
    return price


def _parse_role(value: Any) -> str:
    role = value.value if isinstance(value, UserRole) else str(value or "").strip().lower()
    if role not in _ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(sorted(_ROLES))}")
    return role
