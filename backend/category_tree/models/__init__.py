"""
Database models package.
"""

from category_tree.models.category import Category

__all__ = [
    "Category",
]
