from typing import TYPE_CHECKING

from ...domain.repositories.donor_repository import DonorRepository
from ...domain.repositories.stats_repository import StatsRepository
from ...application.services.donation_service import DonationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DonationProvider:
    """Donation service provider - registers registration and read-path services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register donation service.
        Service is created with repositories from container.
        """
        container.register_singleton(
            DonationService,
            DonationService(
                donor_repository=container.get(DonorRepository),
                stats_repository=container.get(StatsRepository),
            )
        )
