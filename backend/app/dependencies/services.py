"""Service dependencies and result-to-HTTP translation for routers."""

from typing import TypeVar

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.constants import ErrorKind
from app.database import get_db
from app.services import (
    AssetLifecycleService,
    AssetRepository,
    CategoryRepository,
    CategoryService,
    EmployeeRepository,
    EmployeeService,
    ServiceResult,
)

T = TypeVar("T")

ERROR_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_STATE: status.HTTP_409_CONFLICT,
    ErrorKind.DUPLICATE: status.HTTP_409_CONFLICT,
}


def get_asset_service(db: Session = Depends(get_db)) -> AssetLifecycleService:
    """Build the lifecycle service on the request's session."""
    return AssetLifecycleService(
        assets=AssetRepository(db),
        categories=CategoryRepository(db),
        employees=EmployeeRepository(db),
    )


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(categories=CategoryRepository(db), assets=AssetRepository(db))


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(employees=EmployeeRepository(db))


def unwrap_or_raise(result: ServiceResult[T]) -> T:
    """Return the result value or raise the HTTPException matching its error kind."""
    if result.error is not None:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES[result.error.kind],
            detail=result.error.message,
        )
    return result.value
