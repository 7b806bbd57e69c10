"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider, MONGO_CLIENT_KEY
from .repository_provider import RepositoryProvider
from .donation_provider import DonationProvider

__all__ = [
    "DatabaseProvider",
    "MONGO_CLIENT_KEY",
    "RepositoryProvider",
    "DonationProvider",
]
