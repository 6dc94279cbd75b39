"""Exception handlers translating failures into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from grocery_tracker.services.store import FoodNotFoundError, StoreExhaustedError

logger = logging.getLogger(__name__)


class BadRequestError(ValueError):
    """Raised for malformed request input."""


class UnsupportedMediaTypeError(ValueError):
    """Raised when the request body is not declared as JSON."""


def register_error_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers."""

    @app.exception_handler(FoodNotFoundError)
    async def food_not_found_handler(
        request: Request, exc: FoodNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(
        request: Request, exc: BadRequestError
    ) -> JSONResponse:
        logger.warning("Bad request on %s: %s", request.url.path, exc)
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(UnsupportedMediaTypeError)
    async def unsupported_media_type_handler(
        request: Request, exc: UnsupportedMediaTypeError
    ) -> JSONResponse:
        return _error(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = format_validation_errors(exc.errors())
        logger.warning("Validation error on %s: %s", request.url.path, message)
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StoreExhaustedError)
    async def store_exhausted_handler(
        request: Request, exc: StoreExhaustedError
    ) -> JSONResponse:
        logger.error("Store exhausted on %s: %s", request.url.path, exc)
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def format_validation_errors(errors: object) -> str:
    """Flatten pydantic error entries into a single readable message."""
    if not isinstance(errors, (list, tuple)):
        return "invalid request"
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})
