"""
Todo Service - Main Application
===============================

JSON CRUD API over a single PostgreSQL `todos` table.

Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Todo entity
- Infrastructure: Database engine, ORM model, repository
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.config import Settings, get_settings
from src.core import StartupException
from src.infrastructure.database import init_database
from src.todos.interfaces import todo_router
from src.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    global_exception_handler,
    request_validation_handler,
)
from src.shared.infrastructure.logging import setup_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database is opened by the lifespan, so constructing the app has
    no side effects beyond reading settings.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        """
        STARTUP:
        1. Setup structured logging
        2. Connect to the database and verify it answers
        3. Create the todos table if missing

        SHUTDOWN:
        1. Close database connections
        """
        setup_logging(settings.log_level, settings.env)
        logger.info("Starting Todo App", extra={
            "version": settings.app_version,
            "environment": settings.env,
            "port": settings.port,
        })

        try:
            database = await init_database(settings)
        except StartupException:
            logger.critical("Startup aborted")
            raise

        app.state.database = database
        logger.info("Todo App started successfully")

        yield

        logger.info("Shutting down Todo App")
        await database.close()
        logger.info("Todo App shutdown complete")

    app = FastAPI(
        title="Todo API",
        description="Create, list, complete and delete todos.",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # === Middleware ===
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # === Routers ===
    app.include_router(todo_router)

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint for load balancers and orchestrators."""
        database = getattr(request.app.state, "database", None)
        connected = database is not None and await database.ping()

        return {
            "status": "healthy" if connected else "degraded",
            "version": settings.app_version,
            "environment": settings.env,
            "checks": {"database": "connected" if connected else "unavailable"},
        }

    # Mounted last so API routes take precedence over the client bundle
    if settings.is_production:
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True, check_dir=False),
            name="client",
        )

    return app


app = create_app()


# === Development Entry Point ===

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
