"""
Stats Repository Interface
==========================

Abstract interface for the singleton stats aggregate.
"""
from abc import ABC, abstractmethod
from typing import Tuple

from blood_drive.domain.models.stats import StatsAggregate


class StatsRepository(ABC):
    """
    Abstract repository for the stats aggregate.

    Every operation creates the singleton if it does not exist yet.
    """

    def ensure_indexes(self) -> None:
        """Prepare storage indexes. Implementations without indexes need not override."""
        return None

    @abstractmethod
    def get(self) -> StatsAggregate:
        """
        Return the current aggregate, creating it with a zero total if absent.

        Returns:
            The stats aggregate
        """
        pass

    @abstractmethod
    def increment(self, amount: int = 1) -> StatsAggregate:
        """
        Atomically add ``amount`` to the total and touch last_updated.

        Args:
            amount: Positive number of units to add

        Returns:
            The aggregate after the increment
        """
        pass

    @abstractmethod
    def set_total(self, total_units: int) -> Tuple[StatsAggregate, int]:
        """
        Overwrite the total (drift repair) and touch last_updated.

        Args:
            total_units: Non-negative new total

        Returns:
            The aggregate after the update and the total it replaced
            (0 if the aggregate did not exist yet)
        """
        pass
