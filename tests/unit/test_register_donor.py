"""Unit tests for the registration and reconciliation use cases."""

import logging
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from blood_drive.application.use_cases.donation.register_donor import RegisterDonorUseCase
from blood_drive.application.use_cases.stats.reconcile_stats import ReconcileStatsUseCase
from blood_drive.domain.exceptions import DonorValidationError, StorageUnavailableError
from blood_drive.domain.models.donor import Donor
from blood_drive.domain.models.stats import StatsAggregate
from blood_drive.domain.repositories.donor_repository import DonorRepository
from blood_drive.domain.repositories.stats_repository import StatsRepository
from blood_drive.infrastructure.db.mongo_stats_repository import MongoStatsRepository


class IncrementFailingStatsRepository(MongoStatsRepository):
    """Stats store whose increment fails as if MongoDB went away mid-transaction."""

    def increment(self, amount: int = 1):
        raise StorageUnavailableError("stats increment", "server selection timed out")


@pytest.fixture
def use_case(donor_repository, stats_repository) -> RegisterDonorUseCase:
    return RegisterDonorUseCase(donor_repository, stats_repository)


class TestRegisterDonor:
    def test_registers_donor_and_increments_total(self, use_case, donor_repository, stats_repository):
        result = use_case.execute(full_name="Jane Doe", blood_group="O-", age=30, year="SY")

        assert result.donor.full_name == "Jane Doe"
        assert result.donor.blood_group == "O-"
        assert result.donor.donated_at is not None
        assert result.total_units == 1
        assert donor_repository.count() == 1
        assert stats_repository.get().total_units == 1

    def test_trims_full_name(self, use_case):
        result = use_case.execute(full_name="  Jane Doe  ", blood_group="A+", age=22, year="FY")
        assert result.donor.full_name == "Jane Doe"

    def test_accepts_age_as_form_string(self, use_case):
        result = use_case.execute(full_name="Jane Doe", blood_group="A+", age="22", year="FY")
        assert result.donor.age == 22

    def test_missing_fields_are_all_reported(self, use_case, donor_repository, stats_repository):
        with pytest.raises(DonorValidationError) as exc_info:
            use_case.execute(full_name=None, blood_group="", age=None, year="  ")

        assert exc_info.value.errors == [
            "Full name is required",
            "Blood group is required",
            "Age is required",
            "Year is required",
        ]
        assert donor_repository.count() == 0
        assert stats_repository.get().total_units == 0

    def test_presence_and_rule_errors_combined(self, use_case):
        with pytest.raises(DonorValidationError) as exc_info:
            use_case.execute(full_name="Al", blood_group="O-", age=17, year=None)

        assert exc_info.value.errors == [
            "Donor must be at least 18 years old",
            "Year is required",
        ]

    @pytest.mark.parametrize("age", [17, 66, "12", 0])
    def test_out_of_range_age_has_no_side_effects(self, use_case, donor_repository, stats_repository, age):
        with pytest.raises(DonorValidationError):
            use_case.execute(full_name="Jane Doe", blood_group="O-", age=age, year="SY")

        assert donor_repository.count() == 0
        assert stats_repository.get().total_units == 0

    def test_increment_failure_leaves_donor_stored(self, database, donor_repository):
        failing_stats = IncrementFailingStatsRepository(database["stats"])
        use_case = RegisterDonorUseCase(donor_repository, failing_stats)

        with pytest.raises(StorageUnavailableError):
            use_case.execute(full_name="Jane Doe", blood_group="O-", age=30, year="SY")

        assert donor_repository.count() == 1
        assert failing_stats.get().total_units == 0

    def test_donor_write_failure_skips_increment(self, stats_repository):
        class UnavailableDonorRepository:
            def create(self, donor: Donor) -> Donor:
                raise StorageUnavailableError("donor create")

        use_case = RegisterDonorUseCase(UnavailableDonorRepository(), stats_repository)

        with pytest.raises(StorageUnavailableError):
            use_case.execute(full_name="Jane Doe", blood_group="O-", age=30, year="SY")

        assert stats_repository.get().total_units == 0


class TestReconcileStats:
    def test_repairs_undercount(self, database, donor_repository, stats_repository):
        failing_stats = IncrementFailingStatsRepository(database["stats"])
        register = RegisterDonorUseCase(donor_repository, failing_stats)
        for _ in range(3):
            with pytest.raises(StorageUnavailableError):
                register.execute(full_name="Jane Doe", blood_group="B+", age=30, year="TY")

        stats = ReconcileStatsUseCase(donor_repository, stats_repository).execute()

        assert stats.total_units == 3
        assert stats_repository.get().total_units == donor_repository.count()

    def test_repairs_overcount(self, donor_repository, stats_repository):
        stats_repository.increment(5)

        stats = ReconcileStatsUseCase(donor_repository, stats_repository).execute()

        assert stats.total_units == 0

    def test_touches_last_updated(self, donor_repository, stats_repository):
        before = stats_repository.get().last_updated

        ReconcileStatsUseCase(donor_repository, stats_repository).execute()

        assert stats_repository.get().last_updated >= before

    def test_drift_comes_from_the_overwrite_without_a_separate_read(self, caplog):
        donors = MagicMock(spec=DonorRepository)
        donors.count.return_value = 4
        stats = MagicMock(spec=StatsRepository)
        stats.set_total.return_value = (StatsAggregate(total_units=4, last_updated=datetime.now(timezone.utc)), 6)

        with caplog.at_level(logging.WARNING):
            result = ReconcileStatsUseCase(donors, stats).execute()

        assert result.total_units == 4
        stats.set_total.assert_called_once_with(4)
        stats.get.assert_not_called()
        assert "total_units 6 -> 4" in caplog.text

    def test_no_drift_logs_no_warning(self, donor_repository, stats_repository, caplog):
        stats_repository.get()

        with caplog.at_level(logging.WARNING):
            ReconcileStatsUseCase(donor_repository, stats_repository).execute()

        assert "drift repaired" not in caplog.text
