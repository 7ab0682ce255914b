"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for services. Services should use repositories for data access rather
than directly querying SQLAlchemy models.

The Repository pattern separates data access from business logic:
- Repositories: Pure data access (queries, inserts, deletes)
- Services: Lifecycle rules and validation that use repositories

Dependency direction: Services -> Repositories -> Models
"""

from .asset_repository import AssetRepository
from .category_repository import CategoryRepository
from .employee_repository import EmployeeRepository
from .exceptions import DuplicateError, NotFoundError, RepositoryError

__all__ = [
    "AssetRepository",
    "CategoryRepository",
    "DuplicateError",
    "EmployeeRepository",
    "NotFoundError",
    "RepositoryError",
]
