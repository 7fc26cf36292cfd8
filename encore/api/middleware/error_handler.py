"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Collection with id '3' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. EncoreException subclasses → Use their status_code and to_dict()
2. Request validation (FastAPI / pydantic) → 400 with validation details
3. Other exceptions → 500 with generic message (details hidden); the
   request context middleware builds this response itself so it still
   carries X-Request-ID

Usage:
======
    from encore.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from encore.shared.core.exceptions import EncoreException, ValidationError
from encore.shared.core.logging import logger


def _validation_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    # pydantic error dicts may carry the raw input and exception objects in "ctx"
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


def _validation_response(errors: Sequence[Any]) -> JSONResponse:
    exc = ValidationError(
        "Request validation failed",
        details={"errors": _validation_errors(errors)},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unexpected exception and build the generic 500 response.

    Must be called from inside the except block handling exc, while the
    request logging context is still bound.
    """
    logger.error(
        "Unexpected error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(EncoreException)
    async def encore_exception_handler(
        request: Request,
        exc: EncoreException,
    ) -> JSONResponse:
        """
        Handle Encore-specific exceptions.

        All custom exceptions inherit from EncoreException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle malformed requests.

        Covers bad path parameters (non-positive ids) and bodies that don't
        match the expected schema. Always 400, never FastAPI's default 422,
        which is reserved for ordering mismatches.
        """
        logger.warning(
            "Request validation error",
            errors=_validation_errors(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(PydanticValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: PydanticValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised inside handlers.
        """
        logger.warning(
            "Validation error",
            errors=_validation_errors(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        return internal_error_response(request, exc)
