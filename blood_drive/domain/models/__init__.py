from .donor import Donor, parse_whole_number
from .stats import StatsAggregate

__all__ = ["Donor", "parse_whole_number", "StatsAggregate"]
