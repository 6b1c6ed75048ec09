"""Dashboard shell: login gate, navigation between pages, initial data load."""

import logging

from connector_admin.application.entity_kinds import CONNECTORS, USERS, EntityKind
from connector_admin.application.interfaces import AttachmentUploader, DataGateway
from connector_admin.application.services.auth_service import AuthService
from connector_admin.application.services.entity_page import EntityPage
from connector_admin.application.services.entity_store import EntityStore
from connector_admin.application.services.list_view import DEFAULT_PAGE_SIZE
from connector_admin.domain.exceptions import AuthenticationError, DataServiceError

logger = logging.getLogger(__name__)

DASHBOARD = "dashboard"

PAGE_TITLES: dict[str, str] = {
    DASHBOARD: "Dashboard",
    USERS.name: "Users Management",
    CONNECTORS.name: "Connectors Management",
}

_PAGE_KINDS: dict[str, EntityKind] = {USERS.name: USERS, CONNECTORS.name: CONNECTORS}


class AdminShell:
    """Owns the entity store and the page currently on screen.

    Only one entity page exists at a time; navigating away closes it so that
    requests it started cannot write into a page nobody is looking at.
    """

    def __init__(
        self,
        gateway: DataGateway,
        auth: AuthService,
        *,
        uploader: AttachmentUploader | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._gateway = gateway
        self._auth = auth
        self._uploader = uploader
        self._page_size = page_size
        self._token: str | None = None
        self._current = DASHBOARD
        self._page: EntityPage | None = None
        self.store = EntityStore((USERS, CONNECTORS))
        self.error: str | None = None

    # ── Session ─────────────────────────────────────────────────────

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def login(self, username_or_email: str, password: str) -> bool:
        token = self._auth.login(username_or_email, password)
        if token is None:
            return False
        self._token = token
        return True

    def logout(self) -> None:
        self._close_page()
        self._current = DASHBOARD
        self._token = None

    def _require_login(self) -> None:
        if not self.is_authenticated:
            raise AuthenticationError("Log in to use the dashboard")

    # ── Navigation ──────────────────────────────────────────────────

    @property
    def current(self) -> str:
        return self._current

    @property
    def title(self) -> str:
        return PAGE_TITLES[self._current]

    @property
    def page(self) -> EntityPage | None:
        """The entity page on screen, or None on the dashboard."""
        return self._page

    def navigate(self, name: str) -> EntityPage | None:
        self._require_login()
        if name not in PAGE_TITLES:
            raise ValueError(f"Unknown page '{name}'; expected one of {', '.join(PAGE_TITLES)}")

        self._close_page()
        self._current = name
        kind = _PAGE_KINDS.get(name)
        if kind is not None:
            self._page = EntityPage(
                kind,
                self.store,
                self._gateway,
                uploader=self._uploader,
                page_size=self._page_size,
            )
        return self._page

    def _close_page(self) -> None:
        if self._page is not None:
            self._page.close()
            self._page = None

    # ── Data ────────────────────────────────────────────────────────

    async def load(self) -> None:
        """Load both collections; on failure keep the last-known lists and show the error."""
        self._require_login()
        try:
            users = await self._gateway.list_records(USERS)
            connectors = await self._gateway.list_records(CONNECTORS)
        except DataServiceError as exc:
            logger.error("Data load failed: %s", exc)
            self.error = str(exc)
            return

        self.error = None
        self.store.reconcile_list(USERS, users)
        self.store.reconcile_list(CONNECTORS, connectors)
        logger.info("Loaded %d user(s) and %d connector(s)", len(users), len(connectors))

    def dashboard_counts(self) -> dict[str, int]:
        return {
            USERS.name: self.store.count(USERS),
            CONNECTORS.name: self.store.count(CONNECTORS),
        }
