"""Dependency wiring: connects infrastructure adapters to the application layer."""

import logging
from collections.abc import AsyncGenerator

from connector_admin.application.interfaces import DataGateway
from connector_admin.application.services import AdminShell, AuthService, DataService
from connector_admin.config import Settings, get_settings
from connector_admin.infrastructure.gateways import HttpDataGateway, LocalFileGateway
from connector_admin.infrastructure.storage.json_document_store import JsonDocumentStore

logger = logging.getLogger(__name__)


def build_data_service(settings: Settings | None = None) -> DataService:
    settings = settings or get_settings()
    return DataService(JsonDocumentStore(settings.data_file))


def build_gateway(settings: Settings | None = None) -> DataGateway:
    """Pick the gateway for the configured data backend.

    Raises ConfigurationError straight away when BACKEND_URL is unusable.
    """
    settings = settings or get_settings()
    if settings.data_backend == "file":
        logger.info("Using local data file %s", settings.data_file)
        return LocalFileGateway(build_data_service(settings))

    gateway = HttpDataGateway(
        base_url=settings.resolved_backend_url,
        timeout=settings.request_timeout,
    )
    logger.info("Using data backend %s", gateway.base_url)
    return gateway


def build_shell(settings: Settings | None = None) -> AdminShell:
    """Assemble a dashboard shell with its own store, gateway and login gate."""
    settings = settings or get_settings()
    gateway = build_gateway(settings)
    uploader = gateway if isinstance(gateway, HttpDataGateway) else None
    auth = AuthService(
        username=settings.admin_username,
        email=settings.admin_email,
        password=settings.admin_password,
    )
    return AdminShell(gateway, auth, uploader=uploader, page_size=settings.page_size)


async def get_data_service() -> AsyncGenerator[DataService, None]:
    """FastAPI dependency: a DataService over the configured data file."""
    yield build_data_service()
