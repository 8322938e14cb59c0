"""
Category database model.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from category_tree.database import Base


class Category(Base):
    """Category model with hierarchical support.

    Children are not stored; they are every row whose ``parent_id`` points here.
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(255), nullable=False, unique=True)
    parent_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Category id={self.id} label={self.label!r} parent_id={self.parent_id}>"
