from .donor_repository import DonorRepository
from .stats_repository import StatsRepository

__all__ = ["DonorRepository", "StatsRepository"]
