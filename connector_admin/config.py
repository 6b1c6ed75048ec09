import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic_settings import BaseSettings

from connector_admin.domain.exceptions import ConfigurationError

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)

DEFAULT_BACKEND_URL = "http://localhost:5000"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Connector Admin API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Data source: "http" talks to BACKEND_URL, "file" uses the local JSON document
    backend_url: str = ""
    data_backend: Literal["http", "file"] = "http"
    data_file: str = "data/app-data.json"
    request_timeout: float = 30.0

    # Dashboard
    page_size: int = 10
    admin_username: str = "admin"
    admin_email: str = "admin@yazaki.com"
    admin_password: str = "admin123"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore, outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_gateway: str = "INFO"          # data gateways

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.page_size < 1:
            _config_logger.warning("PAGE_SIZE=%s is not usable, falling back to 10", self.page_size)
            self.page_size = 10

    @property
    def resolved_backend_url(self) -> str:
        """The backend origin with defaults applied; see ``resolve_backend_url``."""
        return resolve_backend_url(self.backend_url)


def resolve_backend_url(raw: str | None) -> str:
    """Return the backend origin to use, failing fast on anything unusable.

    Absent or blank falls back to ``DEFAULT_BACKEND_URL``. Anything else must
    be an absolute ``http(s)`` URL with a host; a trailing slash is dropped.
    """
    value = (raw or "").strip()
    if not value:
        return DEFAULT_BACKEND_URL

    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(
            f"BACKEND_URL must be an absolute http(s) URL such as "
            f"'{DEFAULT_BACKEND_URL}', got {value!r}"
        )
    return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
