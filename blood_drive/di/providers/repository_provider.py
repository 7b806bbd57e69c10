from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.donor_repository import DonorRepository
from ...domain.repositories.stats_repository import StatsRepository
from ...infrastructure.db.mongo_donor_repository import MongoDonorRepository
from ...infrastructure.db.mongo_stats_repository import MongoStatsRepository
from .database_provider import MONGO_CLIENT_KEY

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        settings = get_settings()
        mongo_client = container.get(MONGO_CLIENT_KEY)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            DonorRepository,
            MongoDonorRepository(mongo_client.get_collection(settings.donors_collection))
        )

        container.register_singleton(
            StatsRepository,
            MongoStatsRepository(mongo_client.get_collection(settings.stats_collection))
        )
