from .donation_service import DonationService

__all__ = ["DonationService"]
