"""FastAPI application factory for the local data service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from connector_admin.config import get_settings
from connector_admin.infrastructure.logging.log_config import setup_logging
from connector_admin.presentation.api.v1.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and make sure the data directory exists."""
    settings = get_settings()
    setup_logging()

    data_file = Path(settings.data_file)
    data_file.parent.mkdir(parents=True, exist_ok=True)
    if not data_file.exists():
        logger.warning("Data file %s not found; collections start empty", data_file)

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "connector_admin.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
    )
