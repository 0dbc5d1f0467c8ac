"""FastAPI application factory and lifecycle.

Middleware run in reverse order of registration, so the last one added is
the first to see a request. Exception handlers are registered before the
middleware, and tracing instrumentation is applied last.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI
from loguru import logger

from stratum.api.middleware.error_handler import register_exception_handlers
from stratum.api.middleware.request_context import RequestContextMiddleware
from stratum.api.middleware.request_logging import RequestLoggingMiddleware
from stratum.api.middleware.security_headers import SecurityHeadersMiddleware
from stratum.api.routers import api_router
from stratum.api.utils.responses import ORJSONResponse
from stratum.core.config import Settings, get_settings
from stratum.core.logging import setup_logging
from stratum.core.observability import instrument_app, setup_tracing
from stratum.domain import models as domain_models
from stratum.infrastructure.database.session import (
    check_database_connection,
    close_database,
    create_all_tables,
    get_engine,
)


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app_instance: The FastAPI application instance.

    Yields:
        None: Nothing is yielded, this is just a lifespan context.

    Raises:
        RuntimeError: If database connection fails during startup.
    """
    is_healthy, error_msg = await check_database_connection()
    if not is_healthy:
        logger.error("Database connection failed during startup: {}", error_msg)
        msg = f"Database connection failed: {error_msg}"
        raise RuntimeError(msg)
    logger.info("Database connection successful")

    if get_settings().database_config.create_tables_on_startup:
        logger.info("Creating tables for models: {}", domain_models.__all__)
        await create_all_tables()

    logger.info(
        "Application startup complete - {} v{}",
        app_instance.title,
        app_instance.version,
    )

    yield

    logger.info("Application shutdown initiated")
    await close_database()
    logger.info("Application shutdown complete")


def _pool_metrics() -> dict[str, int]:
    """Return connection pool counters the current pool implementation exposes."""
    pool = get_engine().pool
    metrics: dict[str, int] = {}
    for name in ("checkedout", "size", "overflow"):
        if callable(counter := getattr(pool, name, None)):
            metrics[name] = counter()
    return metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings instance. If not provided, will use get_settings().

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)
    setup_tracing(settings)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    register_exception_handlers(application)

    # 3. Request logging (request ID, timing)
    application.add_middleware(RequestLoggingMiddleware, log_config=settings.log_config)
    # 2. Request context (correlation ID)
    application.add_middleware(RequestContextMiddleware)
    # 1. Security headers
    application.add_middleware(SecurityHeadersMiddleware)

    application.include_router(api_router)

    @application.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning a welcome message."""
        return {"message": f"Hello from {settings.app_name}!"}

    @application.get("/health")
    async def health() -> dict[str, object]:
        """Health check endpoint for monitoring and container orchestration.

        A failing database marks the service as degraded rather than down.

        Returns:
            dict[str, object]: Status and database connectivity.
        """
        is_healthy, error_msg = await check_database_connection()

        if is_healthy:
            logger.bind(metric_type="db.pool.health", **_pool_metrics()).info(
                "Database pool health check"
            )
        else:
            logger.warning("Database health check failed: {}", error_msg)

        return {
            "status": "healthy" if is_healthy else "degraded",
            "database": is_healthy,
        }

    @application.get("/info")
    async def info(
        app_settings: Annotated[Settings, Depends(get_settings)],
    ) -> dict[str, Any]:
        """Get application information.

        Args:
            app_settings: Application settings injected via dependency.

        Returns:
            dict[str, Any]: Application name, version and environment.
        """
        return {
            "app_name": app_settings.app_name,
            "version": app_settings.app_version,
            "environment": app_settings.environment,
            "debug": app_settings.debug,
        }

    instrument_app(application, settings)

    return application


app = create_app()
