"""Employees API router."""

from fastapi import APIRouter, Depends, Request, status

from app.config import settings
from app.dependencies.services import get_employee_service, unwrap_or_raise
from app.rate_limiter import limiter
from app.schemas.employee import Employee as EmployeeSchema
from app.schemas.employee import EmployeeCreate
from app.services import EmployeeService

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeSchema])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """Get all employees."""
    return unwrap_or_raise(service.list_all())


@router.post("", response_model=EmployeeSchema, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.write_rate_limit)
def create_employee(
    request: Request,
    employee: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a new employee with a caller-supplied id."""
    return unwrap_or_raise(service.create(employee))
