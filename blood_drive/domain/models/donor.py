"""
Donor Model
===========

Domain model representing one blood donor registration.
This is a pure domain object with no infrastructure dependencies.
"""
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from blood_drive.domain.constants.donor_fields import DonorFields
from blood_drive.domain.constants.donor_rules import (
    ACADEMIC_YEARS,
    BLOOD_GROUPS,
    MAX_DONOR_AGE,
    MIN_DONOR_AGE,
    MIN_NAME_LENGTH,
)
from blood_drive.domain.exceptions import DonorValidationError


_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


def _new_donor_id() -> str:
    return uuid.uuid4().hex


def _is_encodable(text: str) -> bool:
    # Lone surrogates decode from JSON but cannot be stored as BSON UTF-8
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass(frozen=True)
class Donor:
    """
    Donor domain model.

    Donor records are append-only: once stored they are never changed,
    so the dataclass is frozen. ``donated_at`` is None until the donor
    store assigns it on create.
    """
    full_name: str
    blood_group: str
    age: int
    year: str
    id: str = field(default_factory=_new_donor_id)
    donated_at: Optional[datetime] = None

    def validation_errors(self) -> Dict[str, str]:
        """Return a message for each field that breaks the registration rules, keyed by field."""
        errors: Dict[str, str] = {}

        if not isinstance(self.full_name, str) or len(self.full_name.strip()) < MIN_NAME_LENGTH:
            errors[DonorFields.FULL_NAME] = f"Name must be at least {MIN_NAME_LENGTH} characters long"
        elif not _is_encodable(self.full_name):
            errors[DonorFields.FULL_NAME] = "Name contains invalid characters"

        if self.blood_group not in BLOOD_GROUPS:
            errors[DonorFields.BLOOD_GROUP] = "Invalid blood group"

        # bool is an int subclass; True must not pass as age 1
        if not isinstance(self.age, int) or isinstance(self.age, bool):
            errors[DonorFields.AGE] = "Age must be a whole number"
        elif self.age < MIN_DONOR_AGE:
            errors[DonorFields.AGE] = f"Donor must be at least {MIN_DONOR_AGE} years old"
        elif self.age > MAX_DONOR_AGE:
            errors[DonorFields.AGE] = f"Donor must be {MAX_DONOR_AGE} years or younger"

        if self.year not in ACADEMIC_YEARS:
            errors[DonorFields.YEAR] = "Invalid year selection"

        return errors

    def validate(self) -> None:
        """
        Check the donor against the registration rules.

        Raises:
            DonorValidationError: If any field is invalid
        """
        errors = self.validation_errors()
        if errors:
            raise DonorValidationError(list(errors.values()))

    def with_donated_at(self, donated_at: datetime) -> "Donor":
        """Return a copy stamped with its creation time."""
        return Donor(
            full_name=self.full_name,
            blood_group=self.blood_group,
            age=self.age,
            year=self.year,
            id=self.id,
            donated_at=donated_at,
        )


def parse_whole_number(raw: Any) -> Optional[int]:
    """
    Coerce a submitted number (age, query limit) into an int.

    Form posts deliver numbers as strings, JSON clients as numbers.
    Returns None when the value is not a whole number.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        if _WHOLE_NUMBER.fullmatch(text):
            return int(text)
    return None
