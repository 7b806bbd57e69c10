"""
Donor Repository Interface
==========================

Abstract interface for the append-only donor store.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from blood_drive.domain.models.donor import Donor


class DonorRepository(ABC):
    """
    Abstract repository for donor persistence operations.

    Donors are only ever inserted; there is no update or delete.
    """

    def ensure_indexes(self) -> None:
        """Prepare storage indexes. Implementations without indexes need not override."""
        return None

    @abstractmethod
    def create(self, donor: Donor) -> Donor:
        """
        Validate and persist a new donor.

        Args:
            donor: Donor entity to create (donated_at is assigned here)

        Returns:
            Created donor entity with donated_at set

        Raises:
            DonorValidationError: If the donor breaks a registration rule
            StorageUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def list_recent(self, limit: int) -> List[Donor]:
        """
        Return up to ``limit`` donors, most recent first.

        Ties on donated_at are broken by insertion order, later first.

        Args:
            limit: Maximum number of donors to return

        Returns:
            List of donor entities
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """
        Count all persisted donors.

        Returns:
            Exact number of donor records
        """
        pass
