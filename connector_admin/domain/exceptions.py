"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ConfigurationError(Exception):
    """Raised at startup when a setting cannot be used as given."""


class AuthenticationError(Exception):
    """Raised when an action requires a logged-in admin."""


# ── Data gateway errors ──────────────────────────────────────────────


class DataServiceError(Exception):
    """Base class for every error surfaced by a data gateway operation.

    UI actions catch this one type, show ``str(exc)`` to the user and keep
    their prior state.
    """


class TransportError(DataServiceError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not reach {url}: {reason}")


class ProtocolError(DataServiceError):
    """The backend answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body_excerpt: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body_excerpt = body_excerpt
        message = f"{status_code} {reason}".strip()
        if body_excerpt:
            message = f"{message} - {body_excerpt}"
        super().__init__(message)


class FormatError(DataServiceError):
    """The response body is not the structure the gateway expects."""


class ValidationError(DataServiceError):
    """A business rule rejected the record (blank field, duplicate key, ...)."""


class IdentityError(DataServiceError):
    """The surrogate id needed to address a record cannot be resolved."""

    def __init__(self, entity_type: str, identity: object = None, message: str | None = None):
        self.entity_type = entity_type
        self.identity = identity
        super().__init__(
            message or f"Cannot resolve a backend id for {entity_type} {identity!r}"
        )


class SubmitInProgressError(DataServiceError):
    """A form submit was attempted while the previous one is still pending."""

    def __init__(self) -> None:
        super().__init__("A save is already in progress")
