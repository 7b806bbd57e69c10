"""Constants for Stats aggregate field names"""


class StatsFields:
    """Field name constants for the Stats singleton document"""
    IDENTIFIER = "identifier"
    TOTAL_UNITS = "total_units"
    LAST_UPDATED = "last_updated"


# Key of the one and only stats document
GLOBAL_STATS_IDENTIFIER = "global"
