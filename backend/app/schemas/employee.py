"""Pydantic schemas for Employee model."""

from pydantic import BaseModel, ConfigDict, Field


class EmployeeBase(BaseModel):
    """Base Employee schema with common fields."""

    full_name: str = Field(..., min_length=1, max_length=200)
    designation: str | None = Field(None, max_length=100)


class EmployeeCreate(EmployeeBase):
    """Schema for creating an Employee. The caller chooses the id."""

    id: int = Field(..., ge=1, description="Employee number assigned by HR")


class EmployeeReference(BaseModel):
    """Reference to an Employee by id."""

    id: int | None = None


class Employee(EmployeeBase):
    """Schema for Employee responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
