"""
Error response schemas.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""
    status: int
    error: str
    message: str


class ValidationErrorResponse(ErrorResponse):
    """Body returned when the request payload fails validation."""
    errors: dict[str, str]
