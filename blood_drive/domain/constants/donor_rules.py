"""Registration rules shared by validation and the API schema"""
from typing import Final, Tuple

BLOOD_GROUPS: Final[Tuple[str, ...]] = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
ACADEMIC_YEARS: Final[Tuple[str, ...]] = ("FY", "SY", "TY", "Final Year")

MIN_NAME_LENGTH: Final[int] = 2
MIN_DONOR_AGE: Final[int] = 18
MAX_DONOR_AGE: Final[int] = 65
