"""
Main API router.
"""

from fastapi import APIRouter
from category_tree.api import categories

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
