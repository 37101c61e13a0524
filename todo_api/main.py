"""Todo API — FastAPI application factory and process entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → {"message": ...} responses
    - The store is opened by the lifespan before the first request and closed on shutdown;
      a store injected into create_app() is used as-is and never closed here
    - Missing .env, invalid settings or an unreachable database stop the process
      before it serves anything

Design Decisions:
    - create_app(settings, store) factory over a module-level app: tests build an
      app around an in-memory store, production builds one in run()
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todos
from todo_api.config import DEFAULT_ENV_FILE, Settings, load_settings
from todo_api.core.errors import ConfigurationError, StoreConnectionError
from todo_api.infrastructure.database import TodoStore
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        try:
            app.state.store = await TodoStore.connect(
                settings.mongo_uri,
                settings.mongo_database,
                settings.mongo_collection,
                timeout_ms=settings.mongo_timeout_ms,
            )
        except StoreConnectionError as e:
            logger.critical(e.message, extra={"error_code": e.code})
            raise
    logger.info("Todo API started")
    try:
        yield
    finally:
        if owns_store:
            app.state.store.close()
            app.state.store = None
        logger.info("Todo API shutting down")


def create_app(settings: Settings, store: TodoStore | None = None) -> FastAPI:
    """Build the application. Pass store to skip opening a MongoDB connection."""
    app = FastAPI(title="Todo API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    if store is not None:
        app.state.store = store

    # CORS — configured from settings, not hardcoded
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(todos.router)
    return app


def run(env_file: str = DEFAULT_ENV_FILE) -> None:
    """Load configuration and serve until interrupted. Exits 1 on configuration errors."""
    setup_logging("INFO", "text")
    try:
        settings = load_settings(env_file)
    except ConfigurationError as e:
        logger.critical(e.message, extra={"error_code": e.code})
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
