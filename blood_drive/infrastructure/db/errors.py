"""Translation of driver errors into domain errors."""
import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo.errors import PyMongoError

from blood_drive.domain.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """
    Run a block of MongoDB calls, re-raising driver failures as StorageUnavailableError.

    Args:
        operation: Short name of the operation, used in logs and the error message
    """
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB %s failed: %s", operation, e, exc_info=True)
        raise StorageUnavailableError(operation, str(e)) from e
