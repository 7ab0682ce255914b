"""Category service - CRUD over the category store."""

import logging

from app.constants import ErrorKind
from app.models import Category
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.repositories import (
    AssetRepository,
    CategoryRepository,
    DuplicateError,
    NotFoundError,
)
from app.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CategoryService:
    """Adds, lists, updates and deletes categories.

    Name uniqueness is left to the store's unique constraint. Deleting a
    category that assets still reference is refused.
    """

    def __init__(self, categories: CategoryRepository, assets: AssetRepository) -> None:
        self._categories = categories
        self._assets = assets

    def add(self, draft: CategoryCreate) -> ServiceResult[Category]:
        category = Category(name=draft.name, description=draft.description)
        try:
            category = self._categories.save(category)
        except DuplicateError as e:
            return ServiceResult.fail(ErrorKind.DUPLICATE, str(e))
        logger.info(f"Created category {category.id} '{category.name}'")
        return ServiceResult.ok(category)

    def list_all(self) -> ServiceResult[list[Category]]:
        return ServiceResult.ok(list(self._categories.find_all()))

    def get(self, category_id: int) -> ServiceResult[Category]:
        try:
            return ServiceResult.ok(self._categories.get_by_id(category_id))
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

    def update(self, category_id: int, draft: CategoryUpdate) -> ServiceResult[Category]:
        """Overwrite name and description of an existing category."""
        try:
            category = self._categories.get_by_id(category_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        category.name = draft.name
        category.description = draft.description
        try:
            category = self._categories.save(category)
        except DuplicateError as e:
            return ServiceResult.fail(ErrorKind.DUPLICATE, str(e))
        return ServiceResult.ok(category)

    def delete(self, category_id: int) -> ServiceResult[None]:
        """Delete a category that no asset references."""
        try:
            category = self._categories.get_by_id(category_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        asset_count = self._assets.count_by_category(category_id)
        if asset_count:
            logger.warning(
                f"Refused to delete category {category_id} used by {asset_count} assets"
            )
            return ServiceResult.fail(
                ErrorKind.INVALID_STATE, "Cannot delete category that has assets"
            )

        self._categories.delete(category)
        logger.info(f"Deleted category {category_id}")
        return ServiceResult.ok(None)
