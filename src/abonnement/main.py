"""
Main FastAPI application entry point.

Uses Application Factory Pattern: every app owns its settings and DI
container, nothing is shared through module globals.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from abonnement.config.settings import Settings, load_config
from abonnement.di.container import DIContainer
from abonnement.domain.exceptions import AbonnementException
from abonnement.infrastructure.monitoring import get_logger, setup_logging
from abonnement.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    abonnement_exception_handler,
    request_validation_exception_handler,
)
from abonnement.presentation.api.routes import health, subscriptions


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (loaded from config if None)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = load_config()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating {settings.APP_NAME} application (ENV={settings.ENV})")

    container = DIContainer(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Connect the database on startup, dispose it on shutdown."""
        logger.info(f"Starting {settings.APP_NAME} application...")
        await container.initialize()
        logger.info(f"{settings.APP_NAME} application started successfully")

        yield

        logger.info(f"Shutting down {settings.APP_NAME} application...")
        await container.shutdown()
        logger.info(f"{settings.APP_NAME} application shutdown complete")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Subscription cost ledger",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container

    # Middleware chain, last added runs first
    app.add_middleware(RequestIDMiddleware)
    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AbonnementException, abonnement_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )

    # Register routes
    app.include_router(health.router, prefix="/api")
    app.include_router(subscriptions.router, prefix="/api/v1")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": settings.APP_NAME,
            "status": "running",
            "version": settings.APP_VERSION,
            "description": "Subscription cost ledger",
        }

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """
        Comprehensive health check endpoint.

        Returns database status and connection pool statistics.
        """
        database = request.app.state.container.database
        db_healthy = await database.health_check()

        return {
            "status": "healthy" if db_healthy else "degraded",
            "version": settings.APP_VERSION,
            "components": {
                "database": {
                    "status": "healthy" if db_healthy else "unhealthy",
                    "pool": database.pool_stats(),
                },
            },
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info(f"{settings.APP_NAME} application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Create application from configuration files and environment.

    For uvicorn: uvicorn abonnement.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = load_config()
    uvicorn.run(
        "abonnement.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
