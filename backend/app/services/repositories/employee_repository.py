"""Employee data access layer."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Employee
from app.services.repositories.exceptions import DuplicateError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Centralized employee data access.

    Employee ids come from the caller, so save() checks for an existing
    row before inserting instead of relying on a generated key.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, employee_id: int) -> Employee | None:
        """Find employee by primary key."""
        return self._db.query(Employee).filter(Employee.id == employee_id).first()

    def get_by_id(self, employee_id: int) -> Employee:
        """Get employee by primary key or raise NotFoundError."""
        employee = self.find_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        return employee

    def find_all(self) -> "Sequence[Employee]":
        """Find all employees ordered by id."""
        return self._db.query(Employee).order_by(Employee.id).all()

    def save(self, employee: Employee) -> Employee:
        """Persist an employee.

        Raises:
            DuplicateError: if a different employee already uses this id.
        """
        employee_id = employee.id
        if employee not in self._db and self.find_by_id(employee_id) is not None:
            raise DuplicateError("Employee", "id", employee_id)

        self._db.add(employee)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            raise DuplicateError("Employee", "id", employee_id) from e
        self._db.refresh(employee)
        logger.debug(f"Saved employee {employee.id}")
        return employee
