"""Service for building and reshaping the category hierarchy."""

import logging
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from category_tree.exceptions import ConflictError, InvalidOperationError, NotFoundError
from category_tree.models.category import Category
from category_tree.repositories.category_repository import CategoryRepository
from category_tree.schemas.category import CategoryResponse

logger = logging.getLogger(__name__)


def build_category_tree(categories: List[Category], root_id: int) -> CategoryResponse:
    """
    Build the nested tree rooted at ``root_id`` from a flat category list.

    Every category in the list except the root must have its parent in the
    list too. Children keep the order in which they appear in ``categories``.
    """
    category_map: Dict[int, CategoryResponse] = {
        cat.id: CategoryResponse.model_validate(cat) for cat in categories
    }

    for cat in categories:
        if cat.id == root_id:
            continue
        parent = category_map.get(cat.parent_id)
        if parent is not None:
            parent.children.append(category_map[cat.id])

    return category_map[root_id]


class CategoryService:
    """
    Creates, reads, moves and deletes categories.

    Label uniqueness, parent existence and the no-cycle rule are checked here
    before anything is written. The checks and the writes are separate
    statements, so two concurrent requests can both pass a check; only the
    unique label constraint in the database catches that case.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = CategoryRepository(db)

    def _get_or_raise(self, category_id: int, message: str) -> Category:
        category = self.repository.find_by_id(category_id)
        if category is None:
            logger.warning(message)
            raise NotFoundError(message)
        return category

    def create_category(self, label: str, parent_id: Optional[int] = None) -> CategoryResponse:
        """
        Create a category, optionally under an existing parent.

        Raises:
            NotFoundError: ``parent_id`` does not exist.
            ConflictError: another category already uses ``label``.
        """
        if parent_id is not None:
            self._get_or_raise(parent_id, f"Parent not found with id: {parent_id}")

        if self.repository.find_by_label(label) is not None:
            logger.warning(f"Rejected duplicate category label '{label}'")
            raise ConflictError("Category with the label already exists")

        category = self.repository.save(Category(label=label, parent_id=parent_id))
        logger.info(f"Created category {category.id} '{category.label}' under parent {parent_id}")
        return CategoryResponse.model_validate(category)

    def get_subtree(self, category_id: int) -> CategoryResponse:
        """Return the category with all of its descendants nested as children."""
        self._get_or_raise(category_id, f"Category not found with id: {category_id}")

        categories = self.repository.find_subtree(category_id)
        return build_category_tree(categories, category_id)

    def move_subtree(self, source_id: int, new_parent_id: Optional[int] = None) -> None:
        """
        Re-parent a category together with its descendants.

        A ``new_parent_id`` of None moves the category to the root level.

        Raises:
            InvalidOperationError: the category would become its own parent or
                the child of one of its descendants.
            NotFoundError: the source or the new parent does not exist.
        """
        if source_id == new_parent_id:
            logger.warning(f"Rejected move of category {source_id} onto itself")
            raise InvalidOperationError("Cannot move category to itself")

        source = self._get_or_raise(source_id, f"Source category not found with id: {source_id}")

        if new_parent_id is not None:
            self._get_or_raise(
                new_parent_id, f"New parent category not found with id: {new_parent_id}"
            )

            subtree_ids = {cat.id for cat in self.repository.find_subtree(source_id)}
            if new_parent_id in subtree_ids:
                logger.warning(
                    f"Rejected move of category {source_id} under its descendant {new_parent_id}"
                )
                raise InvalidOperationError(
                    "New parent cannot be a descendant of the source category"
                )

        source.parent_id = new_parent_id
        self.repository.save(source)
        logger.info(f"Moved category {source_id} under parent {new_parent_id}")

    def delete_category(self, category_id: int) -> None:
        """Delete a category and every category below it."""
        self._get_or_raise(category_id, f"Category not found with id: {category_id}")

        ids_to_delete = [cat.id for cat in self.repository.find_subtree(category_id)]
        self.repository.delete_by_ids(ids_to_delete)
        logger.info(f"Deleted category {category_id} and {len(ids_to_delete) - 1} descendants")
