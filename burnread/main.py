import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from burnread.infrastructure.store_factory import build_entry_store
from burnread.logging import setup_logging
from burnread.presentation.api import api
from burnread.presentation.errors import register_error_handlers
from burnread.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: an unreachable medium aborts the boot
    settings = app.state.settings
    store = build_entry_store(settings)
    await store.ensure_ready()
    app.state.entry_store = store  # expose to dependencies
    logger.info(
        "burn-on-read service started",
        extra={"backend": settings.storage_backend, "env": settings.app_env},
    )

    try:
        yield
    finally:
        # shutdown
        await store.close()


def create_app() -> FastAPI:
    setup_logging(settings.log_level, backend=settings.storage_backend)
    app = FastAPI(title="Burn on Read API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    register_error_handlers(app)
    app.include_router(api)
    return app


app = create_app()
