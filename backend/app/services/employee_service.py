"""Employee service - create and list only."""

from app.constants import ErrorKind
from app.models import Employee
from app.schemas.employee import EmployeeCreate
from app.services.repositories import DuplicateError, EmployeeRepository
from app.services.result import ServiceResult


class EmployeeService:
    """Pass-through over the employee store. Employees are never updated or deleted."""

    def __init__(self, employees: EmployeeRepository) -> None:
        self._employees = employees

    def create(self, draft: EmployeeCreate) -> ServiceResult[Employee]:
        employee = Employee(id=draft.id, full_name=draft.full_name, designation=draft.designation)
        try:
            return ServiceResult.ok(self._employees.save(employee))
        except DuplicateError as e:
            return ServiceResult.fail(ErrorKind.DUPLICATE, str(e))

    def list_all(self) -> ServiceResult[list[Employee]]:
        return ServiceResult.ok(list(self._employees.find_all()))
