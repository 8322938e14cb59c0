"""Persistence for category records."""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import Integer, literal_column
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased

from category_tree.exceptions import ConflictError
from category_tree.models.category import Category

logger = logging.getLogger(__name__)


class CategoryRepository:
    """
    Reads and writes ``categories`` rows.

    Every write commits immediately; nothing is cached between calls.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by ID."""
        return self.db.query(Category).filter(Category.id == category_id).first()

    def find_by_label(self, label: str) -> Optional[Category]:
        """Find a category by its exact label."""
        return self.db.query(Category).filter(Category.label == label).first()

    def find_subtree(self, root_id: int) -> List[Category]:
        """
        Return the category ``root_id`` and all of its descendants.

        A single recursive query walks the parent reference downwards. Rows are
        ordered by depth below the root, then by id, so the root comes first and
        every category comes after its parent. Unknown ids give an empty list.
        """
        subtree = (
            self.db.query(
                Category.id,
                literal_column("0", Integer).label("depth"),
            )
            .filter(Category.id == root_id)
            .cte(name="subtree", recursive=True)
        )

        parent = aliased(subtree, name="parent")
        child = aliased(Category, name="child")
        subtree = subtree.union_all(
            self.db.query(
                child.id,
                (parent.c.depth + 1).label("depth"),
            ).filter(child.parent_id == parent.c.id)
        )

        return (
            self.db.query(Category)
            .join(subtree, Category.id == subtree.c.id)
            .order_by(subtree.c.depth, Category.id)
            .all()
        )

    def save(self, category: Category) -> Category:
        """Insert a new category or persist changes to an existing one."""
        label = category.label
        self.db.add(category)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Another writer may have taken the label between check and commit
            existing = self.find_by_label(label)
            if existing is not None and existing.id != category.id:
                logger.warning(f"Label constraint rejected category '{label}'")
                raise ConflictError("Category with the label already exists")
            raise
        self.db.refresh(category)
        return category

    def delete_by_ids(self, ids: Iterable[int]) -> None:
        """Delete the given categories in one statement. Unknown ids are ignored."""
        ids = set(ids)
        if not ids:
            return

        self.db.query(Category).filter(Category.id.in_(ids)).delete(
            synchronize_session=False
        )
        self.db.commit()
