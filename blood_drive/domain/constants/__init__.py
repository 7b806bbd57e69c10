from .donor_fields import DonorFields
from .stats_fields import StatsFields, GLOBAL_STATS_IDENTIFIER
from .donor_rules import (
    BLOOD_GROUPS,
    ACADEMIC_YEARS,
    MIN_NAME_LENGTH,
    MIN_DONOR_AGE,
    MAX_DONOR_AGE,
)

__all__ = [
    "DonorFields",
    "StatsFields",
    "GLOBAL_STATS_IDENTIFIER",
    "BLOOD_GROUPS",
    "ACADEMIC_YEARS",
    "MIN_NAME_LENGTH",
    "MIN_DONOR_AGE",
    "MAX_DONOR_AGE",
]
