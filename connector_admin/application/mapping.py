"""Bidirectional record mapping between the UI shape and the backend wire shape."""

from dataclasses import asdict
from typing import Any

from connector_admin.application.entity_kinds import EntityKind
from connector_admin.domain.exceptions import FormatError


def to_wire(kind: EntityKind, record: Any) -> dict[str, Any]:
    """Convert a domain record into the backend JSON object.

    Every attribute in the kind's table produces exactly one key; ``None``
    stays ``None``.
    """
    values = asdict(record)
    payload: dict[str, Any] = {}
    for mapping in kind.fields:
        value = values.get(mapping.attribute)
        if mapping.to_wire is not None:
            value = mapping.to_wire(value)
        payload[mapping.wire_key] = value
    return payload


def from_wire(kind: EntityKind, payload: Any) -> Any:
    """Convert one backend JSON object into a domain record.

    Raises FormatError when the payload is not an object, a required key is
    missing or null, or a converter rejects a value.
    """
    if not isinstance(payload, dict):
        raise FormatError(
            f"Expected a {kind.label} object, got {type(payload).__name__}"
        )

    kwargs: dict[str, Any] = {}
    for mapping in kind.fields:
        value = payload.get(mapping.wire_key)
        if mapping.required and value is None:
            raise FormatError(f"{kind.label} record is missing '{mapping.wire_key}'")
        if mapping.from_wire is not None:
            try:
                value = mapping.from_wire(value)
            except (TypeError, ValueError) as exc:
                raise FormatError(
                    f"{kind.label} field '{mapping.wire_key}' is invalid: {exc}"
                ) from exc
        kwargs[mapping.attribute] = value

    try:
        return kind.record_type(**kwargs)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"Invalid {kind.label} record: {exc}") from exc


def list_from_wire(kind: EntityKind, data: Any) -> list[Any]:
    """Map a list response, keeping the order the backend sent.

    Accepts a bare JSON array or an object that wraps the array under the
    collection name (``{"users": [...]}``).
    """
    if isinstance(data, dict) and isinstance(data.get(kind.name), list):
        data = data[kind.name]
    if not isinstance(data, list):
        raise FormatError(
            f"Expected a list of {kind.name}, got {type(data).__name__}"
        )
    return [from_wire(kind, item) for item in data]
