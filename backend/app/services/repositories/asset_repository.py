"""Asset data access layer.

Centralizes all Asset queries so the lifecycle service never touches
SQLAlchemy directly.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Asset
from app.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class AssetRepository:
    """Centralized asset data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - get_* : Query that raises NotFoundError if missing
    - count_* : Aggregate query returning an int
    - save / delete : Write, committed immediately
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, asset_id: int) -> Asset | None:
        """Find asset by primary key."""
        return self._db.query(Asset).filter(Asset.id == asset_id).first()

    def get_by_id(self, asset_id: int) -> Asset:
        """Get asset by primary key or raise NotFoundError."""
        asset = self.find_by_id(asset_id)
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    def find_all(self) -> "Sequence[Asset]":
        """Find all assets ordered by id."""
        return self._db.query(Asset).order_by(Asset.id).all()

    def find_by_name_containing_ignore_case(self, fragment: str) -> "Sequence[Asset]":
        """Find assets whose name contains fragment (case-insensitive).

        LIKE wildcards in the fragment match literally. An empty fragment
        matches every asset.
        """
        return (
            self._db.query(Asset)
            .filter(Asset.name.icontains(fragment, autoescape=True))
            .order_by(Asset.id)
            .all()
        )

    def count_by_category(self, category_id: int) -> int:
        """Count assets that reference a category."""
        return (
            self._db.query(func.count(Asset.id)).filter(Asset.category_id == category_id).scalar()
        )

    def save(self, asset: Asset) -> Asset:
        """Persist an asset, assigning an id if it has none."""
        self._db.add(asset)
        self._db.commit()
        self._db.refresh(asset)
        return asset

    def delete(self, asset: Asset) -> None:
        """Delete an asset permanently."""
        asset_id = asset.id
        self._db.delete(asset)
        self._db.commit()
        logger.info(f"Deleted asset {asset_id}")
