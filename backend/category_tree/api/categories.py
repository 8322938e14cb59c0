"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional

from category_tree.dependencies import get_category_service
from category_tree.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    MoveRequest,
)
from category_tree.schemas.error import ErrorResponse
from category_tree.services.category_service import CategoryService

router = APIRouter()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse, "description": "Parent category not found"},
        409: {"model": ErrorResponse, "description": "Category with the given label already exists"},
    },
)
def create_category(
    category: CategoryCreate,
    parent_id: Optional[int] = Query(None, alias="parentId"),
    service: CategoryService = Depends(get_category_service)
):
    """Create a new category, optionally under a parent category."""
    return service.create_category(category.label, parent_id)


@router.get(
    "/{category_id}/subtree",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
def get_subtree(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    """Get a category and all its nested children."""
    return service.get_subtree(category_id)


@router.put(
    "/{category_id}/move",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        404: {"model": ErrorResponse, "description": "Category or new parent not found"},
        409: {"model": ErrorResponse, "description": "Move would create a cycle"},
    },
)
def move_subtree(
    category_id: int,
    move: MoveRequest,
    service: CategoryService = Depends(get_category_service)
):
    """Move a category and its children to another parent, or to the root level."""
    service.move_subtree(category_id, move.new_parent_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category together with its whole subtree."""
    service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
