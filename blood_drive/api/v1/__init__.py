"""
API v1 Package
===============

Version 1 API controllers.
"""
from .donation_controller import router as donation_router
from .stats_controller import router as stats_router
from .donor_controller import router as donor_router

__all__ = ["donation_router", "stats_router", "donor_router"]
