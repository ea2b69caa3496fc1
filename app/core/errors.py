"""
=============================================================================
EAST HIDES - ERROR HANDLING MODULE
=============================================================================
Domain exceptions and the handlers that turn them into ``{"error": ...}``
JSON bodies.

Features:
- Missing required fields surface as 400 with the field names
- Malformed payloads surface as 400
- Dispatch failures surface as 500 with a fixed, non-specific message
- Catches unhandled exceptions and logs the full stack trace server-side

Usage:
    # In main.py
    from app.core.errors import register_exception_handlers
    register_exception_handlers(app)
=============================================================================
"""

import logging
import traceback
from typing import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)


class MissingFieldsError(Exception):
    """One or more required fields are absent or empty."""

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(self.public_message)

    @property
    def public_message(self) -> str:
        return f"Missing fields: {', '.join(self.missing_fields)}"


class InvalidPayloadError(Exception):
    """The request body cannot be read as a submission."""

    def __init__(self, message: str = "Invalid JSON payload"):
        self.public_message = message
        super().__init__(message)


class DispatchFault(Exception):
    """The SMTP relay could not accept a message (auth, network, timeout)."""


class SubmissionFailed(Exception):
    """A submission could not be delivered; carries the client-safe message."""

    def __init__(self, public_message: str):
        self.public_message = public_message
        super().__init__(public_message)


class ProductNotFoundError(Exception):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Product not found: {slug}")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain and global exception handlers on the FastAPI app."""

    @app.exception_handler(MissingFieldsError)
    async def missing_fields_handler(request: Request, exc: MissingFieldsError):
        return _error(status.HTTP_400_BAD_REQUEST, exc.public_message)

    @app.exception_handler(InvalidPayloadError)
    async def invalid_payload_handler(request: Request, exc: InvalidPayloadError):
        return _error(status.HTTP_400_BAD_REQUEST, exc.public_message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(
            "Rejected malformed body on %s %s",
            request.method,
            request.url.path,
        )
        return _error(status.HTTP_400_BAD_REQUEST, InvalidPayloadError().public_message)

    @app.exception_handler(SubmissionFailed)
    async def submission_failed_handler(request: Request, exc: SubmissionFailed):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.public_message)

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, "Product not found")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all handler for unhandled exceptions.

        - Logs the full traceback for debugging
        - Returns a generic error message to prevent info leakage
        - In debug mode, includes more details
        """
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}:\n"
            f"{traceback.format_exc()}"
        )

        if settings.DEBUG:
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal Server Error",
                    "error_type": type(exc).__name__,
                    "message": str(exc),
                    "path": request.url.path,
                },
            )
        return _error(500, "Internal Server Error")
