"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while keeping snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryCreate(CamelModel):
    """Schema for creating a category."""
    label: str = Field(..., min_length=1, max_length=255)


class MoveRequest(CamelModel):
    """Schema for moving a category subtree. A null parent moves it to the root level."""
    new_parent_id: Optional[int] = None


class CategoryResponse(CamelModel):
    """Schema for a category, with its nested subtree."""
    id: int
    label: str
    parent_id: Optional[int] = None
    children: list["CategoryResponse"] = []

    model_config = ConfigDict(from_attributes=True)


# Enable forward references for recursive model
CategoryResponse.model_rebuild()
