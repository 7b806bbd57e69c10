from typing import TYPE_CHECKING

from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MONGO_CLIENT_KEY = "mongo_client"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client manager in the container.
        This is the ONLY place where database connections are registered.
        """
        container.register_singleton(MONGO_CLIENT_KEY, get_mongo_client())
