"""
Domain Exceptions
=================

Errors shared by the domain, application and infrastructure layers.
The API layer maps them to HTTP responses.
"""
from typing import List, Sequence


class BloodDriveError(Exception):
    """Base class for all service errors."""


class DonorValidationError(BloodDriveError):
    """
    A donor submission failed validation.

    Carries one message per failing field; nothing has been persisted.
    """

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__(", ".join(self.errors))


class StorageUnavailableError(BloodDriveError):
    """The backing store is unreachable or an operation timed out."""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Store unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
