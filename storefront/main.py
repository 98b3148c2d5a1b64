"""FastAPI application entry point."""

import time
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import Settings, configure_logging, get_settings
from storefront.database import Database
from storefront.infrastructure.catalog.routers import products
from storefront.infrastructure.common.error_handlers import register_exception_handlers
from storefront.infrastructure.common.routers import health
from storefront.infrastructure.identity.routers import users
from storefront.infrastructure.ordering.routers import orders

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; read from the environment when omitted
        database: Pre-built database handle; when given, the caller owns it
            and it is not disposed on shutdown

    Returns:
        The configured FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_database = database is None
        app.state.database = database or Database.from_settings(settings)
        logger.info(
            "application_started",
            environment=settings.ENVIRONMENT,
            version=settings.VERSION,
        )
        try:
            yield
        finally:
            if owns_database:
                app.state.database.dispose()
            logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "request_handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router, prefix=settings.API_V1_PREFIX)
    app.include_router(products.router, prefix=settings.API_V1_PREFIX)
    app.include_router(orders.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn."""
    settings = get_settings()
    logger.info("server_starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run("storefront.main:app", host=settings.HOST, port=settings.PORT)
