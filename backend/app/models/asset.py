"""Asset model - represents company-owned physical items."""

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.constants import AssignmentStatus
from app.database import Base

if TYPE_CHECKING:
    from app.models.category import Category
    from app.models.employee import Employee


class Asset(Base):
    """Asset model tracking category membership and employee assignment.

    assigned_to is set only while assignment_status is ASSIGNED.
    """

    __tablename__ = "assets"
    __table_args__ = (
        Index("idx_assets_name", "name"),
        Index("idx_assets_category", "category_id"),
        Index("idx_assets_assigned_to", "assigned_to_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200))
    purchase_date: Mapped[date | None]
    condition_notes: Mapped[str | None] = mapped_column(Text)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id", ondelete="RESTRICT"))
    assignment_status: Mapped[AssignmentStatus] = mapped_column(
        Enum(AssignmentStatus, native_enum=False, length=20),
        default=AssignmentStatus.AVAILABLE,
    )
    assigned_to_id: Mapped[int | None] = mapped_column(
        ForeignKey("employees.id", ondelete="RESTRICT")
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(server_default=func.now(), onupdate=func.now())

    # Relationships
    category: Mapped["Category"] = relationship(back_populates="assets", lazy="joined")
    assigned_to: Mapped["Employee | None"] = relationship(back_populates="assets", lazy="joined")

    def __repr__(self) -> str:
        return (
            f"<Asset(id={self.id}, name='{self.name}', "
            f"status={self.assignment_status.value if self.assignment_status else None})>"
        )
