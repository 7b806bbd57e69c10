"""
Register Donor Use Case
=======================

Business use case for one donor signup: validate, store the donor,
then bump the stats aggregate.

The donor insert and the counter increment are two independent writes,
not a multi-document transaction. If the increment fails after the donor
was stored, the total undercounts by one until ReconcileStatsUseCase runs.
"""
import logging
from dataclasses import dataclass
from typing import Any, List

from blood_drive.domain.constants.donor_fields import DonorFields
from blood_drive.domain.exceptions import DonorValidationError, StorageUnavailableError
from blood_drive.domain.models.donor import Donor, parse_whole_number
from blood_drive.domain.repositories.donor_repository import DonorRepository
from blood_drive.domain.repositories.stats_repository import StatsRepository

logger = logging.getLogger(__name__)

REQUIRED_MESSAGES = {
    DonorFields.FULL_NAME: "Full name is required",
    DonorFields.BLOOD_GROUP: "Blood group is required",
    DonorFields.AGE: "Age is required",
    DonorFields.YEAR: "Year is required",
}


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a successful registration."""
    donor: Donor
    total_units: int


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class RegisterDonorUseCase:
    """
    Use case for registering a blood donor.

    This encapsulates the business logic for donor registration.
    """

    def __init__(self, donor_repository: DonorRepository, stats_repository: StatsRepository):
        """
        Initialize use case with repositories.

        Args:
            donor_repository: Append-only donor store
            stats_repository: Singleton stats aggregate store
        """
        self._donors = donor_repository
        self._stats = stats_repository

    def _build_donor(self, full_name: Any, blood_group: Any, age: Any, year: Any) -> Donor:
        """Run presence checks and coercion, then the donor rules; collect every failure."""
        submitted = {
            DonorFields.FULL_NAME: full_name,
            DonorFields.BLOOD_GROUP: blood_group,
            DonorFields.AGE: age,
            DonorFields.YEAR: year,
        }
        missing = {name for name, value in submitted.items() if _is_blank(value)}

        donor = Donor(
            full_name=full_name.strip() if isinstance(full_name, str) else full_name,
            blood_group=blood_group,
            age=None if DonorFields.AGE in missing else parse_whole_number(age),
            year=year,
        )
        rule_errors = donor.validation_errors()

        # One message per field, presence first, in form order
        errors: List[str] = []
        for name in submitted:
            if name in missing:
                errors.append(REQUIRED_MESSAGES[name])
            elif name in rule_errors:
                errors.append(rule_errors[name])

        if errors:
            raise DonorValidationError(errors)
        return donor

    def execute(self, full_name: Any, blood_group: Any, age: Any, year: Any) -> RegistrationResult:
        """
        Execute the register donor use case.

        Args:
            full_name: Donor's full name
            blood_group: One of the eight ABO/Rh groups
            age: Whole number of years, as int or numeric string
            year: Academic year (FY, SY, TY, Final Year)

        Returns:
            The stored donor and the new total

        Raises:
            DonorValidationError: If input validation fails; nothing is written
            StorageUnavailableError: If either write fails
        """
        donor = self._build_donor(full_name, blood_group, age, year)

        # A failure here aborts before the counter is touched
        created = self._donors.create(donor)

        try:
            stats = self._stats.increment(1)
        except StorageUnavailableError:
            logger.error(
                "Donor %s stored but stats increment failed; total undercounts until reconciled",
                created.id,
            )
            raise

        logger.info("New donor registered: %s (%s)", created.full_name, created.blood_group)
        return RegistrationResult(donor=created, total_units=stats.total_units)
