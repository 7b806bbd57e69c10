"""
Blood Drive
===========

Donor registration service for a blood donation drive: a registration
endpoint, a singleton running total of blood units, and the polling
read path used by the live dashboard.
"""

__version__ = "1.0.0"
