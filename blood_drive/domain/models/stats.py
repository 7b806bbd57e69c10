"""
Stats Model
===========

The singleton aggregate counting registered blood units.
"""
from dataclasses import dataclass
from datetime import datetime

from blood_drive.domain.constants.stats_fields import GLOBAL_STATS_IDENTIFIER


@dataclass(frozen=True)
class StatsAggregate:
    """
    Running total of registered units.

    Exactly one instance exists in the store, keyed by ``identifier``.
    ``total_units`` is never negative.
    """
    total_units: int
    last_updated: datetime
    identifier: str = GLOBAL_STATS_IDENTIFIER
