"""FastAPI application for the bug tracker"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from .api.bugs import router as bugs_router
from .api.errors import register_error_handlers
from .api.schemas import MessageResponse
from .config import Settings
from .logging_config import setup_logging
from .storage import BugService, Database

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and duration"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            process_time = (time.time() - start_time) * 1000
            logger.error(f"Request failed: {request.method} {request.url.path} ({process_time:.2f}ms)")
            raise
        process_time = (time.time() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.2f}ms"
        )
        return response


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    When no database is passed, one is created from ``settings`` on startup
    and its schema is migrated to the latest revision.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Bug Tracker API",
        description="Track and manage software bugs",
        version="0.1.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings
    app.state.database = database
    app.state.owns_database = database is None
    app.state.bug_service = BugService(database) if database is not None else None

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include API routers
    app.include_router(bugs_router, prefix="/api/bugs", tags=["bugs"])

    @app.get("/api/health", response_model=MessageResponse)
    async def health_check():
        """Health check endpoint"""
        return {"success": True, "message": "Server is running"}

    @app.on_event("startup")
    async def startup_event():
        """Connect to the bug store and bring its schema up to date"""
        if app.state.database is None:
            from .storage.migrations import initialize_database

            initialize_database(settings.database_url)
            app.state.database = Database(settings.database_url)
            app.state.bug_service = BugService(app.state.database)
        logger.info("Connected to bug store %r", app.state.database)

    @app.on_event("shutdown")
    async def shutdown_event():
        if app.state.owns_database and app.state.database is not None:
            app.state.database.dispose()

    return app


settings = Settings.from_env()
setup_logging(settings.log_level, settings.log_dir)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
