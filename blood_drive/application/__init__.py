"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Register a donor, reconcile the stats aggregate
- Services: DonationService, the single entry point used by the API
- DTOs: Pydantic request/response models
"""
