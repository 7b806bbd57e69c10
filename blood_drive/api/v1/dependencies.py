"""
Dependency Container
====================

Dependency providers for FastAPI routes.
Resolve singleton services from the DI container.
"""
from blood_drive.application.services.donation_service import DonationService
from blood_drive.core.config import Settings, get_settings
from blood_drive.di.container import get_container


def get_donation_service() -> DonationService:
    """
    Get donation service instance (singleton).

    Returns:
        DonationService instance
    """
    container = get_container()
    return container.get(DonationService)


def get_app_settings() -> Settings:
    """Settings as a route dependency, so tests can override limits."""
    return get_settings()
