"""
Reconcile Stats Use Case
========================

Drift repair: reset the stats total to the real number of stored donors.
Only runs when explicitly requested (POST /api/sync-stats).
"""
import logging

from blood_drive.domain.models.stats import StatsAggregate
from blood_drive.domain.repositories.donor_repository import DonorRepository
from blood_drive.domain.repositories.stats_repository import StatsRepository

logger = logging.getLogger(__name__)


class ReconcileStatsUseCase:
    """Use case for recomputing the stats aggregate from the donor store."""

    def __init__(self, donor_repository: DonorRepository, stats_repository: StatsRepository):
        self._donors = donor_repository
        self._stats = stats_repository

    def execute(self) -> StatsAggregate:
        """
        Execute the reconcile use case.

        Returns:
            The aggregate after its total was overwritten with the donor count

        Raises:
            StorageUnavailableError: If the store cannot be reached
        """
        donor_count = self._donors.count()
        stats, previous_total = self._stats.set_total(donor_count)

        if previous_total != donor_count:
            logger.warning(
                "Stats drift repaired: total_units %d -> %d",
                previous_total,
                donor_count,
            )
        else:
            logger.info("Stats synced, no drift (total donors: %d)", donor_count)
        return stats
