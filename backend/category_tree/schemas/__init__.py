"""
Pydantic schemas package.
"""

from category_tree.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    MoveRequest,
)
from category_tree.schemas.error import (
    ErrorResponse,
    ValidationErrorResponse,
)

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "MoveRequest",
    "ErrorResponse",
    "ValidationErrorResponse",
]
