"""Employee Records API - FastAPI Entry Point.

Run with::

    uvicorn app.main:app --reload
"""
import logging
import sqlite3
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .database import close_db, init_db
from .dependencies import create_store
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

# Import routers
from .routes.employees import router as employees_router

logger = logging.getLogger(__name__)


def create_app(store_backend: str | None = None) -> FastAPI:
    """Create and configure the application.

    Args:
        store_backend: "sqlite" or "memory"; defaults to config.STORE_BACKEND
    """
    # Logging first so startup messages are captured
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    backend = store_backend or config.STORE_BACKEND

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        app.state.employee_store = create_store(backend)
        if app.state.employee_store is None:
            init_db()
        logger.info("Employee store backend: %s", backend)
        yield
        close_db()

    app = FastAPI(title=config.API_TITLE, version=config.API_VERSION, lifespan=lifespan)

    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(sqlite3.Error)
    async def store_error_handler(request: Request, exc: sqlite3.Error):
        logger.error(
            "Record store failure on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok"}

    app.include_router(employees_router)
    return app


app = create_app()
