"""CampusHub Session API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CampusHubError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One SessionStore per process, built and initialized in the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Missing tables created on startup so a fresh device-local SQLite file works
      without running migrations first
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campushub.api.error_handlers import register_error_handlers
from campushub.api.routes import health, session
from campushub.config import Settings, get_settings
from campushub.core.repository_protocols import KeyValueStore
import campushub.infrastructure.database as db_module
from campushub.infrastructure.kv_store import InMemoryKeyValueStore, SqlKeyValueStore
from campushub.infrastructure.observability import setup_logging
from campushub.services.session_store import SessionStore

logger = logging.getLogger(__name__)


async def build_kv_store(settings: Settings) -> KeyValueStore:
    """Pick the storage backend named in settings."""
    if settings.session_backend == "memory":
        return InMemoryKeyValueStore()
    manager = db_module.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    return SqlKeyValueStore(manager)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    kv_store = await build_kv_store(settings)
    store = SessionStore(kv_store, settings.session_storage_key)
    app.state.session_store = store
    await store.initialize()
    logger.info("CampusHub session API started")
    yield
    logger.info("CampusHub session API shutting down")
    if db_module.db_manager:
        await db_module.db_manager.dispose()


app = FastAPI(
    title="CampusHub Session API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(session.router)

register_error_handlers(app)
