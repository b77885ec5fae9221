"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from virement.config.settings import Settings, get_settings
from virement.di import initialize_container, shutdown_container
from virement.domain.exceptions import VirementException
from virement.infrastructure.monitoring import get_logger, setup_logging
from virement.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    RequestTimeoutMiddleware,
    virement_exception_handler,
)
from virement.presentation.api.routes import health_router, transfer_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Virement application (ENV={settings.ENV})")

    initialize_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            f"Virement started on {settings.SOLANA_NETWORK} "
            f"(actions at {settings.ACTIONS_PREFIX or '/'})"
        )

        yield

        shutdown_container()
        logger.info("Virement shutdown complete")

    app = FastAPI(
        title="Virement API",
        description="Solana transfer action: unsigned SOL transfers",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # Middleware chain (last added runs first)
    app.add_middleware(RequestTimeoutMiddleware, timeout=settings.REQUEST_TIMEOUT)
    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Exception handlers
    app.add_exception_handler(VirementException, virement_exception_handler)

    # Register routes
    app.include_router(health_router)
    app.include_router(transfer_router, prefix=settings.ACTIONS_PREFIX)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": settings.APP_NAME,
            "status": "running",
            "version": settings.APP_VERSION,
            "network": settings.SOLANA_NETWORK,
            "actions": {"transfer": f"{settings.ACTIONS_PREFIX}/transfer"},
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """Prometheus metrics endpoint."""
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Virement application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance.

    For uvicorn: uvicorn virement.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "virement.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
