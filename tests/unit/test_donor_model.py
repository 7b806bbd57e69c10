"""Unit tests for the Donor model rules."""

import pytest

from blood_drive.domain.constants.donor_fields import DonorFields
from blood_drive.domain.exceptions import DonorValidationError
from blood_drive.domain.models.donor import Donor, parse_whole_number


def make_donor(**overrides) -> Donor:
    fields = {"full_name": "Jane Doe", "blood_group": "O-", "age": 30, "year": "SY"}
    fields.update(overrides)
    return Donor(**fields)


class TestDonorValidation:
    def test_valid_donor_has_no_errors(self):
        assert make_donor().validation_errors() == {}
        make_donor().validate()

    @pytest.mark.parametrize("group", ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"])
    def test_accepts_every_blood_group(self, group):
        assert make_donor(blood_group=group).validation_errors() == {}

    @pytest.mark.parametrize("group", ["C+", "o-", "AB", "", None])
    def test_rejects_unknown_blood_group(self, group):
        errors = make_donor(blood_group=group).validation_errors()
        assert errors == {DonorFields.BLOOD_GROUP: "Invalid blood group"}

    @pytest.mark.parametrize("year", ["FY", "SY", "TY", "Final Year"])
    def test_accepts_every_year(self, year):
        assert make_donor(year=year).validation_errors() == {}

    def test_rejects_unknown_year(self):
        errors = make_donor(year="PhD").validation_errors()
        assert errors == {DonorFields.YEAR: "Invalid year selection"}

    @pytest.mark.parametrize("age", [18, 40, 65])
    def test_age_bounds_are_inclusive(self, age):
        assert make_donor(age=age).validation_errors() == {}

    def test_underage_donor_rejected(self):
        errors = make_donor(age=17).validation_errors()
        assert errors[DonorFields.AGE] == "Donor must be at least 18 years old"

    def test_overage_donor_rejected(self):
        errors = make_donor(age=66).validation_errors()
        assert errors[DonorFields.AGE] == "Donor must be 65 years or younger"

    @pytest.mark.parametrize("age", [True, 30.5, "30", None])
    def test_non_integer_age_rejected(self, age):
        errors = make_donor(age=age).validation_errors()
        assert errors[DonorFields.AGE] == "Age must be a whole number"

    @pytest.mark.parametrize("name", ["A", " A ", "", "   "])
    def test_short_name_rejected_after_trimming(self, name):
        errors = make_donor(full_name=name).validation_errors()
        assert errors[DonorFields.FULL_NAME] == "Name must be at least 2 characters long"

    def test_name_with_lone_surrogate_rejected(self):
        errors = make_donor(full_name="Ja\ud800ne").validation_errors()
        assert errors == {DonorFields.FULL_NAME: "Name contains invalid characters"}

    def test_non_ascii_name_accepted(self):
        assert make_donor(full_name="Zoë Łukasz").validation_errors() == {}

    def test_validate_reports_every_failing_field(self):
        donor = make_donor(full_name="A", blood_group="Z", age=10, year="X")

        with pytest.raises(DonorValidationError) as exc_info:
            donor.validate()

        assert len(exc_info.value.errors) == 4
        assert "Invalid blood group" in str(exc_info.value)
        assert "Invalid year selection" in str(exc_info.value)

    def test_donors_get_unique_ids(self):
        assert make_donor().id != make_donor().id

    def test_donor_is_immutable(self):
        donor = make_donor()
        with pytest.raises(AttributeError):
            donor.full_name = "Someone Else"


class TestParseWholeNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (30, 30),
            ("30", 30),
            (" 42 ", 42),
            ("+20", 20),
            ("-5", -5),
            (25.0, 25),
        ],
    )
    def test_parses_whole_numbers(self, raw, expected):
        assert parse_whole_number(raw) == expected

    @pytest.mark.parametrize("raw", [True, False, 30.5, "thirty", "3.5", "", None, [30], "+-5"])
    def test_rejects_everything_else(self, raw):
        assert parse_whole_number(raw) is None
