"""
Error Handlers
==============

Render every failed request as ``{"success": false, "message": ...}``.
The UI displays ``message`` verbatim.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blood_drive.application.dto.donation_dto import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation error list into one readable sentence."""
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        text = error.get("msg", "Invalid value")
        messages.append(f"{'.'.join(location)}: {text}" if location else text)
    return ", ".join(messages) or "Invalid request"


def register_error_handlers(application: FastAPI) -> None:
    """
    Register the application-wide exception handlers.

    Args:
        application: FastAPI app to attach the handlers to
    """

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    # Malformed or missing JSON bodies are client errors, reported as 400 not 422
    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
