"""Pydantic schemas for Category model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryBase(BaseModel):
    """Base Category schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)


class CategoryCreate(CategoryBase):
    """Schema for creating a new Category."""

    pass


class CategoryUpdate(CategoryBase):
    """Schema for updating a Category. Both fields are overwritten."""

    pass


class CategoryReference(BaseModel):
    """Reference to an existing Category by id, as sent inside an asset body."""

    id: int | None = None


class Category(CategoryBase):
    """Schema for Category responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
