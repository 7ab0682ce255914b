"""Categories API router."""

from fastapi import APIRouter, Depends, Request, status

from app.config import settings
from app.dependencies.services import get_category_service, unwrap_or_raise
from app.rate_limiter import limiter
from app.schemas.category import Category as CategorySchema
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.post("", response_model=CategorySchema, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.write_rate_limit)
def create_category(
    request: Request,
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    """Create a new category. Names must be unique."""
    return unwrap_or_raise(service.add(category))


@router.get("", response_model=list[CategorySchema])
def list_categories(service: CategoryService = Depends(get_category_service)):
    """Get all categories."""
    return unwrap_or_raise(service.list_all())


@router.get("/{category_id}", response_model=CategorySchema)
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    """Get a specific category by ID."""
    return unwrap_or_raise(service.get(category_id))


@router.put("/{category_id}", response_model=CategorySchema)
@limiter.limit(settings.write_rate_limit)
def update_category(
    request: Request,
    category_id: int,
    category_update: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    """Overwrite a category's name and description."""
    return unwrap_or_raise(service.update(category_id, category_update))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(settings.write_rate_limit)
def delete_category(
    request: Request,
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category. Refused while any asset still uses it."""
    unwrap_or_raise(service.delete(category_id))
