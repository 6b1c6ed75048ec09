"""REST backend client: implements the DataGateway and AttachmentUploader ports.

Talks to the backend's ``/users``, ``/connectors`` and ``/upload`` endpoints
with httpx, mapping records between the UI and wire shapes and turning
every failure into a typed ``DataServiceError``.
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

import httpx

from connector_admin.application.entity_kinds import EntityKind
from connector_admin.application.interfaces import AttachmentUploader, DataGateway
from connector_admin.application.mapping import from_wire, list_from_wire, to_wire
from connector_admin.config import resolve_backend_url
from connector_admin.domain.entities import ATTACHMENT_SLOTS, Attachment
from connector_admin.domain.exceptions import (
    FormatError,
    IdentityError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from connector_admin.infrastructure.storage.media_paths import normalize_media_path

logger = logging.getLogger(__name__)

BODY_EXCERPT_LENGTH = 200

# Statuses a backend uses to reject a record on business grounds
_VALIDATION_STATUSES = frozenset({400, 409, 422})


class HttpDataGateway(DataGateway, AttachmentUploader):
    """Infrastructure adapter: connects to the REST data backend.

    An injected ``httpx.AsyncClient`` is reused across calls; without one a
    short-lived client is opened per request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = resolve_backend_url(base_url)
        self._timeout = timeout
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        # ngrok tunnels serve an HTML interstitial unless told not to
        if "ngrok" in (urlparse(self._base_url).hostname or ""):
            headers["ngrok-skip-browser-warning"] = "true"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request, converting connection-level failures to TransportError."""
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        logger.debug("%s %s", method, url)
        try:
            return await client.request(method, url, headers=self._get_headers(), **kwargs)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(url, str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

    # ── CRUD ────────────────────────────────────────────────────────

    async def list_records(self, kind: EntityKind) -> list[Any]:
        response = await self._request("GET", f"/{kind.name}")
        self._raise_for_status(response)
        return list_from_wire(kind, self._parse_json(response))

    async def create_record(self, kind: EntityKind, draft: Any) -> Any:
        response = await self._request("POST", f"/{kind.name}", json=to_wire(kind, draft))
        self._raise_for_status(response, rejectable=True)
        return from_wire(kind, self._parse_json(response))

    async def update_record(self, kind: EntityKind, identity: int | None, draft: Any) -> Any:
        record_id = self._require_identity(kind, identity)
        response = await self._request(
            "PUT", f"/{kind.name}/{record_id}", json=to_wire(kind, draft)
        )
        self._raise_for_status(response, rejectable=True)
        return from_wire(kind, self._parse_json(response))

    async def delete_record(self, kind: EntityKind, identity: int | None) -> None:
        record_id = self._require_identity(kind, identity)
        response = await self._request("DELETE", f"/{kind.name}/{record_id}")
        self._raise_for_status(response)

    # ── Uploads ─────────────────────────────────────────────────────

    async def upload_attachments(
        self, base_filename: str, attachments: Mapping[str, Attachment]
    ) -> dict[str, str]:
        """Upload up to three connector attachments in one multipart request.

        Returns the stored path per slot key (``image``, ``drawing_2d``,
        ``model_3d``), normalised for storage on the record.
        """
        slots = [slot for slot in ATTACHMENT_SLOTS if slot.key in attachments]
        unknown = set(attachments) - {slot.key for slot in ATTACHMENT_SLOTS}
        if unknown:
            raise ValidationError(f"Unknown attachment slot(s): {', '.join(sorted(unknown))}")
        if not slots:
            return {}

        form: dict[str, str] = {"base_filename": base_filename}
        files: dict[str, tuple[str, bytes, str]] = {}
        for slot in ATTACHMENT_SLOTS:
            form[f"subdir{slot.file_number}"] = slot.subdir
        for slot in slots:
            attachment = attachments[slot.key]
            files[f"file{slot.file_number}"] = (
                attachment.filename,
                attachment.content,
                attachment.content_type,
            )

        response = await self._request("POST", "/upload", data=form, files=files)
        self._raise_for_status(response)
        data = self._parse_json(response)

        entries = data.get("files") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise FormatError("Upload response has no 'files' list")

        by_number: dict[int, dict[str, Any]] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            try:
                by_number[int(entry.get("file_number"))] = entry
            except (TypeError, ValueError):
                continue

        resolved: dict[str, str] = {}
        for slot in slots:
            entry = by_number.get(slot.file_number, {})
            path = normalize_media_path(entry.get("full_url") or entry.get("file_path"))
            if path is None:
                raise FormatError(f"Upload response has no stored path for '{slot.key}'")
            resolved[slot.key] = path

        logger.info("Uploaded %d attachment(s) for %s", len(resolved), base_filename)
        return resolved

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def _require_identity(kind: EntityKind, identity: int | None) -> int:
        if identity is None or isinstance(identity, bool) or not isinstance(identity, int):
            raise IdentityError(kind.label, identity)
        return identity

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        """Decode a success body, raising FormatError when it is not JSON."""
        try:
            return response.json()
        except ValueError as exc:
            excerpt = response.text[:BODY_EXCERPT_LENGTH]
            raise FormatError(f"Response is not valid JSON: {excerpt!r}") from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, *, rejectable: bool = False) -> None:
        """Raise ValidationError or ProtocolError for a non-2xx response."""
        if response.is_success:
            return

        body = response.text
        if rejectable and response.status_code in _VALIDATION_STATUSES:
            raise ValidationError(_detail_text(response) or body or response.reason_phrase)

        logger.warning(
            "%s %s returned %d", response.request.method, response.request.url, response.status_code
        )
        raise ProtocolError(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body_excerpt=body[:BODY_EXCERPT_LENGTH],
        )


def _detail_text(response: httpx.Response) -> str | None:
    """Pull the human-readable detail out of an error body, if it is JSON."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    for key in ("detail", "error", "message"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
        if value:
            return str(value)
    return None
