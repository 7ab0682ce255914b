"""Employee model - a person who may hold an assigned asset."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.asset import Asset


class Employee(Base):
    """Employee model. The id is supplied by the caller, not generated."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    full_name: Mapped[str] = mapped_column(String(200))
    designation: Mapped[str | None] = mapped_column(String(100))

    # Relationships
    assets: Mapped[list["Asset"]] = relationship(
        back_populates="assigned_to", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, full_name='{self.full_name}')>"
