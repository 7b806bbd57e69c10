"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers under /api
- Dependencies: Service lookups through the DI container
- Errors: Handlers rendering every failure as {success: false, message}
"""
