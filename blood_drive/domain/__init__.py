"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on web frameworks or database drivers.

Contains:
- Models: Donor record and the Stats aggregate
- Repository Interfaces: Abstract contracts for the donor store and stats store
- Exceptions: Validation and storage errors raised across layers
"""
