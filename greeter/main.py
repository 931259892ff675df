"""Greeter: HTTP greeting service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from greeter.config import Settings, get_settings
from greeter.api.routes_greeting import router as greeting_router
from greeter.api.routes_admin import router as admin_router

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info(f"Greeter starting up, greeting subject: {settings.name!r}")

    yield

    logger.info("Greeter shutting down...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around a resolved set of settings.

    Handlers read the greeting subject from ``app.state.settings``; the
    environment is not consulted again after this point. Also usable as a
    uvicorn factory: ``uvicorn --factory greeter.main:create_app``.
    """
    app = FastAPI(
        title="Greeter",
        description="Answers GET / with a configurable greeting.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    app.include_router(greeting_router)
    app.include_router(admin_router)
    return app
