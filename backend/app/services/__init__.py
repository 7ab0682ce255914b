"""Services layer - lifecycle rules and CRUD over the repositories.

- asset_lifecycle_service: asset state machine and cross-entity validation
- category_service / employee_service: thin CRUD wrappers
- repositories/: Data access layer
- result: ServiceResult returned by every service operation

Common imports for convenience:
    from app.services import AssetLifecycleService, ServiceResult
"""

from app.services.asset_lifecycle_service import AssetLifecycleService
from app.services.category_service import CategoryService
from app.services.employee_service import EmployeeService
from app.services.repositories import (
    AssetRepository,
    CategoryRepository,
    DuplicateError,
    EmployeeRepository,
    NotFoundError,
    RepositoryError,
)
from app.services.result import ServiceError, ServiceResult, ServiceResultError

__all__ = [
    # Services
    "AssetLifecycleService",
    "CategoryService",
    "EmployeeService",
    # Repositories
    "AssetRepository",
    "CategoryRepository",
    "DuplicateError",
    "EmployeeRepository",
    "NotFoundError",
    "RepositoryError",
    # Results
    "ServiceError",
    "ServiceResult",
    "ServiceResultError",
]
