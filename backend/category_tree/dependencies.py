"""
FastAPI dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from category_tree.database import get_db
from category_tree.services.category_service import CategoryService


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    """
    Dependency for a category service bound to the request's session.
    """
    return CategoryService(db)
