"""
Logging Setup
=============

Configures the root logger once for the whole service.
Modules log through ``logging.getLogger(__name__)``.
"""
import logging
import sys

from blood_drive.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """
    Configure Python logging for the application.

    Replaces any handlers already attached to the root logger so that
    repeated app creation (tests, reloads) does not duplicate output.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level = (level or get_settings().log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # pymongo's heartbeat/topology logging is noisy at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
