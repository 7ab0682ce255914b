"""Pydantic schemas for API validation."""

from app.schemas.asset import Asset, AssetDraft
from app.schemas.category import Category, CategoryCreate, CategoryReference, CategoryUpdate
from app.schemas.employee import Employee, EmployeeCreate, EmployeeReference

__all__ = [
    # Asset schemas
    "Asset",
    "AssetDraft",
    # Category schemas
    "Category",
    "CategoryCreate",
    "CategoryReference",
    "CategoryUpdate",
    # Employee schemas
    "Employee",
    "EmployeeCreate",
    "EmployeeReference",
]
