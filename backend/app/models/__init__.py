"""SQLAlchemy ORM models."""

from app.models.asset import Asset
from app.models.category import Category
from app.models.employee import Employee

__all__ = [
    "Asset",
    "Category",
    "Employee",
]
