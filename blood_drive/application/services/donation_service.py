"""
Donation Service
================

Application service that coordinates donor registration and the
dashboard read path. This service orchestrates multiple use cases.
"""
from typing import Any, List

from blood_drive.domain.models.donor import Donor
from blood_drive.domain.models.stats import StatsAggregate
from blood_drive.domain.repositories.donor_repository import DonorRepository
from blood_drive.domain.repositories.stats_repository import StatsRepository
from blood_drive.application.use_cases.donation.register_donor import (
    RegisterDonorUseCase,
    RegistrationResult,
)
from blood_drive.application.use_cases.stats.reconcile_stats import ReconcileStatsUseCase


class DonationService:
    """
    Application service for donation operations.

    Reads are plain passthroughs to the repositories with no caching;
    dashboards poll and every poll re-reads the store.
    """

    def __init__(self, donor_repository: DonorRepository, stats_repository: StatsRepository):
        """
        Initialize service with repositories.

        Args:
            donor_repository: Repository for donor persistence
            stats_repository: Repository for the stats aggregate
        """
        self._donors = donor_repository
        self._stats = stats_repository
        self._register_use_case = RegisterDonorUseCase(donor_repository, stats_repository)
        self._reconcile_use_case = ReconcileStatsUseCase(donor_repository, stats_repository)

    def register_donor(self, full_name: Any, blood_group: Any, age: Any, year: Any) -> RegistrationResult:
        """
        Register a donor and increment the unit count.

        Args:
            full_name: Donor's full name
            blood_group: Blood group (A+, A-, B+, B-, AB+, AB-, O+, O-)
            age: Age in whole years
            year: Academic year (FY, SY, TY, Final Year)

        Returns:
            The stored donor and the new total
        """
        return self._register_use_case.execute(
            full_name=full_name,
            blood_group=blood_group,
            age=age,
            year=year,
        )

    def get_stats(self) -> StatsAggregate:
        """Get the current stats aggregate."""
        return self._stats.get()

    def list_recent_donors(self, limit: int) -> List[Donor]:
        """
        List the most recent donors.

        Args:
            limit: Maximum number of donors to return

        Returns:
            Donors ordered most recent first
        """
        return self._donors.list_recent(limit)

    def sync_stats(self) -> StatsAggregate:
        """Reset the total to the actual donor count."""
        return self._reconcile_use_case.execute()
