from .mongo_connection import MongoClientManager, get_mongo_client
from .mongo_donor_repository import MongoDonorRepository
from .mongo_stats_repository import MongoStatsRepository

__all__ = [
    "MongoClientManager",
    "get_mongo_client",
    "MongoDonorRepository",
    "MongoStatsRepository",
]
