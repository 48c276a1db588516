"""linkhop API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Registry and router created once per app and stored on app.state
    - Registry built eagerly on startup: a binding collision aborts startup
    - History database initialized only when history is enabled

Design Decisions:
    - Lifespan context manager owns logging setup, registry build and DB lifecycle
    - Registry object is also usable before lifespan runs (lazy first build), which
      keeps in-process test clients working without startup events
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from linkhop.api.error_handlers import register_error_handlers
from linkhop.api.routes import commands, health, history, landing, search
from linkhop.commands.catalog import build_registry, build_router
from linkhop.config import get_settings
from linkhop.infrastructure import database
from linkhop.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.server.log_level, settings.server.log_format)

    registry = app.state.registry
    table = registry.initialize()
    logger.info(
        f"Command registry ready: {len(registry.commands)} commands, "
        f"{len(table)} bindings",
        extra={
            "command_count": len(registry.commands),
            "binding_count": len(table),
        },
    )

    if settings.history.enabled:
        manager = database.init_db(settings.history.database_url)
        await manager.create_all()
        logger.info("Command history enabled")

    logger.info(
        f"linkhop started with default search: {settings.search_label}",
    )
    yield
    await database.close_db()
    logger.info("linkhop shutting down")


app = FastAPI(title="linkhop", version=VERSION, lifespan=lifespan)

app.state.registry = build_registry()
app.state.router = build_router(app.state.registry)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(landing.router)
app.include_router(commands.router)
app.include_router(history.router)
app.include_router(search.router)

register_error_handlers(app)
