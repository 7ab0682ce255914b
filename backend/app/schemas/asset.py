"""Pydantic schemas for Asset model."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.constants import AssignmentStatus
from app.schemas.category import Category, CategoryReference
from app.schemas.employee import Employee, EmployeeReference


class AssetDraft(BaseModel):
    """Caller-supplied asset data for create and update.

    assignment_status and assigned_to are accepted so clients can send back
    an asset they received, but create ignores both and update only honours
    the status (see AssetLifecycleService.update).
    """

    name: str = Field(..., min_length=1, max_length=200)
    purchase_date: date | None = None
    condition_notes: str | None = None
    category: CategoryReference | None = Field(
        None, description="Existing category, e.g. {\"id\": 1}"
    )
    assignment_status: AssignmentStatus | None = None
    assigned_to: EmployeeReference | None = None


class Asset(BaseModel):
    """Schema for Asset responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    purchase_date: date | None = None
    condition_notes: str | None = None
    category: Category
    assignment_status: AssignmentStatus
    assigned_to: Employee | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
