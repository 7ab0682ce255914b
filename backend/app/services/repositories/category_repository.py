"""Category data access layer."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Category
from app.services.repositories.exceptions import DuplicateError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class CategoryRepository:
    """Centralized category data access.

    Naming conventions:
    - find_* : Query that may return None
    - get_* : Query that raises NotFoundError if missing
    - save : Insert or update, committed immediately
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, category_id: int) -> Category | None:
        """Find category by primary key."""
        return self._db.query(Category).filter(Category.id == category_id).first()

    def get_by_id(self, category_id: int) -> Category:
        """Get category by primary key or raise NotFoundError."""
        category = self.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    def find_by_name(self, name: str) -> Category | None:
        """Find category by exact name."""
        return self._db.query(Category).filter(Category.name == name).first()

    def find_all(self) -> "Sequence[Category]":
        """Find all categories ordered by id."""
        return self._db.query(Category).order_by(Category.id).all()

    def save(self, category: Category) -> Category:
        """Persist a category, assigning an id if it has none.

        Raises:
            DuplicateError: if another category already has this name.
        """
        name = category.name
        self._db.add(category)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logger.warning(f"Rejected category name '{name}': {e.orig}")
            raise DuplicateError("Category", "name", name) from e
        self._db.refresh(category)
        return category

    def delete(self, category: Category) -> None:
        """Delete a category permanently."""
        self._db.delete(category)
        self._db.commit()
