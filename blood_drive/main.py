"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: ensure MongoDB indexes → initialize the stats singleton.
"""
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blood_drive import __version__
from blood_drive.api.errors import register_error_handlers
from blood_drive.api.v1 import donation_router, donor_router, stats_router
from blood_drive.core.config import get_settings
from blood_drive.core.logging import configure_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "Blood Donation Drive API"


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration and error handlers
    - Startup/shutdown event handlers for the MongoDB connection

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=SERVICE_NAME,
        description="Donor registration and live blood unit totals for a blood donation drive",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The registration form and dashboard may be served from another origin
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(donation_router, prefix="/api")
    application.include_router(stats_router, prefix="/api")
    application.include_router(donor_router, prefix="/api")

    register_error_handlers(application)

    @application.on_event("startup")
    def startup_event():
        """
        Prepare MongoDB before serving requests.

        1. Create the donor feed indexes and the unique stats identifier index
        2. Initialize the stats singleton if it does not exist

        An unreachable store aborts startup.
        """
        from blood_drive.di.container import get_container
        from blood_drive.domain.repositories.donor_repository import DonorRepository
        from blood_drive.domain.repositories.stats_repository import StatsRepository

        container = get_container()
        donor_repository = container.get(DonorRepository)
        stats_repository = container.get(StatsRepository)

        try:
            donor_repository.ensure_indexes()
            stats_repository.ensure_indexes()
            stats = stats_repository.get()
        except Exception:
            logger.critical("MongoDB initialization failed", exc_info=True)
            raise

        logger.info("Stats collection initialized (total units: %d)", stats.total_units)
        logger.info("Registration API: http://%s:%d/api/donate", settings.host, settings.port)

    @application.on_event("shutdown")
    def shutdown_event():
        """Close the MongoDB connection pool."""
        from blood_drive.infrastructure.db.mongo_connection import get_mongo_client

        get_mongo_client().close()
        logger.info("All services stopped")

    @application.get("/")
    async def root():
        """Root endpoint - service descriptor."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Serve the app with uvicorn on the configured HOST and PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
