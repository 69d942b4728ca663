"""
LabelSense API

FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from fastapi import FastAPI

from labelsense import __version__
from .schemas import HealthResponse
from .routes import scan, price
from .middleware import (
    setup_cors,
    setup_logging,
    setup_exception_handlers,
    LoggingConfig,
    get_cors_config,
)
from .dependencies import get_settings, Settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown; services are built lazily per request."""
    settings = app.state.settings
    logger.info(f"Starting LabelSense in {settings.environment} mode")
    try:
        yield
    finally:
        logger.info("Shutdown complete")


# =============================================================================
# Application Factory
# =============================================================================

def create_app(settings: Settings = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="LabelSense",
        description="Food label scanning: dietary classification, calories and prices.",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ==========================================================================
    # Middleware (last added = outermost)
    # ==========================================================================

    setup_logging(
        app,
        config=LoggingConfig(enabled=True),
        structured=settings.environment != "development",
    )
    setup_exception_handlers(app)
    setup_cors(
        app,
        config=get_cors_config(settings.environment, settings.cors_allowed_origins),
    )

    # ==========================================================================
    # Routers
    # ==========================================================================

    api_prefix = "/api/v1"

    app.include_router(scan.router, prefix=api_prefix)
    app.include_router(price.router, prefix=api_prefix)

    # ==========================================================================
    # Root Routes
    # ==========================================================================

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "LabelSense",
            "version": __version__,
            "status": "running",
            "docs": "/docs" if settings.debug else None,
        }

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            components={
                "pipeline": "healthy",
                "environment": settings.environment,
            },
        )

    return app


# =============================================================================
# Application Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

def main():
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "labelsense.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        workers=1 if settings.debug else 4,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
