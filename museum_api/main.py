"""Museum Exhibit API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Middleware chain: request logging -> CORS -> router
    - Settings built once in lifespan and passed down; handlers never read env
    - Startup connectivity check is fatal unless SKIP_DB_CHECK is set

Design Decisions:
    - Lifespan over @app.on_event: startup and shutdown in one place
    - Global error handlers live in api/error_handlers.py
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from museum_api.api.error_handlers import register_error_handlers
from museum_api.api.middleware import RequestLoggingMiddleware
from museum_api.api.responses import UTF8JSONResponse
from museum_api.api.routes import health, items, quizzes, recipients, themes
from museum_api.config import Settings, get_settings
from museum_api.infrastructure import database
from museum_api.infrastructure.observability import setup_logging
from museum_api.infrastructure.secret_manager import apply_secret_credentials

logger = logging.getLogger(__name__)


async def start_database(settings: Settings) -> None:
    """Open the pool and, unless skipped, verify the store answers."""
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
    )
    if settings.skip_db_check:
        logger.info("SKIP_DB_CHECK set: skipping database connectivity check")
        return
    await manager.verify(settings.db_connect_timeout_seconds)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    settings = await asyncio.to_thread(apply_secret_credentials, settings)
    await start_database(settings)
    logger.info(f"Museum API started (port {settings.server_port})")
    yield
    logger.info("Museum API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(
        title="Museum Exhibit API",
        version="1.0.0",
        lifespan=lifespan,
        default_response_class=UTF8JSONResponse,
    )
    application.state.settings = settings

    # add_middleware prepends: the last one added runs first
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(health.router)
    application.include_router(themes.router)
    application.include_router(items.router)
    application.include_router(quizzes.router)
    application.include_router(recipients.router)

    register_error_handlers(application)
    return application


app = create_app()
