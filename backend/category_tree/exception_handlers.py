"""Exception handlers that turn failures into structured JSON error bodies."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from category_tree.exceptions import CategoryTreeError
from category_tree.schemas.error import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _field_name(loc: tuple) -> str:
    """Drop the request section ('body', 'query', ...) from a validation error location."""
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def category_tree_exception_handler(request: Request, exc: CategoryTreeError) -> JSONResponse:
    """Render a domain error with the status and label it carries."""
    logger.warning(
        f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}"
    )
    return _error_response(exc.status_code, exc.error, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as a 400 with per-field reasons."""
    errors = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error["loc"]), error["msg"])

    logger.warning(f"{request.method} {request.url.path} failed validation: {errors}")

    body = ValidationErrorResponse(
        status=status.HTTP_400_BAD_REQUEST,
        error="Validation Error",
        message="Invalid request data",
        errors=errors,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected failures. Internal details are logged, not returned."""
    logger.error(
        f"Unexpected {type(exc).__name__} during {request.method} {request.url.path}",
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred while processing your request",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(CategoryTreeError, category_tree_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
