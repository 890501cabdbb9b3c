"""Expense API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExpenseError → {"code", "message"} JSON responses
    - Database initialized and expenses table ensured on startup via lifespan;
      engine disposed on shutdown
    - A startup failure is logged at CRITICAL and aborts the process (non-zero exit)
    - SIGINT/SIGTERM: uvicorn stops accepting connections, waits up to
      shutdown_timeout_seconds for in-flight requests, then force-closes

Design Decisions:
    - Lifespan over @app.on_event
    - Graceful shutdown delegated to uvicorn's timeout_graceful_shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from expense_api import __version__
from expense_api.api.error_handlers import register_error_handlers
from expense_api.api.routes import expenses, health
from expense_api.config import get_settings
from expense_api.infrastructure.database import close_db, init_db
from expense_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await manager.ensure_schema()
    except Exception as e:
        logger.critical(f"failed to create table expenses: {e}", exc_info=True)
        await close_db()
        raise
    logger.info("Expense API started")
    yield
    logger.info("Expense API shutting down")
    await close_db()
    logger.info("shutdown server gracefully")


app = FastAPI(
    title="Expense API", version=__version__, lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(expenses.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app until SIGINT/SIGTERM."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    run()
