# Standard library imports
import os
from typing import Final, List, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv


DEFAULT_MONGODB_URI = "mongodb://localhost:27017/blood_donation"
DEFAULT_DB_NAME = "blood_donation"


def _database_from_uri(uri: str) -> Optional[str]:
    """Return the database name embedded in a MongoDB URI path, if any."""
    path = urlparse(uri).path.lstrip("/")
    return path or None


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone used for donated_at / last_updated timestamps
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGODB_URI", DEFAULT_MONGODB_URI)
        self.mongo_database_name: Final[str] = os.getenv(
            "DB_NAME",
            _database_from_uri(self.mongo_uri) or DEFAULT_DB_NAME,
        )
        # Bounded store access: a slow or unreachable MongoDB fails requests promptly
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
        self.mongo_max_pool_size: Final[int] = int(os.getenv("MONGO_MAX_POOL_SIZE", "50"))

        # Collection Names
        self.donors_collection: Final[str] = os.getenv("DONORS_COLLECTION", "donors")
        self.stats_collection: Final[str] = os.getenv("STATS_COLLECTION", "stats")

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Recent donors feed
        self.donors_default_limit: Final[int] = int(os.getenv("DONORS_DEFAULT_LIMIT", "10"))
        self.donors_max_limit: Final[int] = int(os.getenv("DONORS_MAX_LIMIT", "100"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
