"""Assets API router."""

from fastapi import APIRouter, Depends, Query, Request, status

from app.config import settings
from app.dependencies.services import get_asset_service, unwrap_or_raise
from app.rate_limiter import limiter
from app.schemas.asset import Asset as AssetSchema
from app.schemas.asset import AssetDraft
from app.services import AssetLifecycleService

router = APIRouter(prefix="/api/assets", tags=["assets"])


@router.post("", response_model=AssetSchema, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.write_rate_limit)
def create_asset(
    request: Request,
    draft: AssetDraft,
    service: AssetLifecycleService = Depends(get_asset_service),
):
    """
    Create a new asset in the AVAILABLE state.

    The body must reference an existing category, e.g. `"category": {"id": 1}`.
    Any assignment status or employee in the body is ignored.
    """
    return unwrap_or_raise(service.create(draft))


@router.get("", response_model=list[AssetSchema])
def list_assets(service: AssetLifecycleService = Depends(get_asset_service)):
    """Get all assets."""
    return unwrap_or_raise(service.list_all())


@router.get("/search", response_model=list[AssetSchema])
def search_assets(
    name: str = Query("", description="Case-insensitive fragment of the asset name"),
    service: AssetLifecycleService = Depends(get_asset_service),
):
    """Search assets by name."""
    return unwrap_or_raise(service.search(name))


@router.get("/{asset_id}", response_model=AssetSchema)
def get_asset(asset_id: int, service: AssetLifecycleService = Depends(get_asset_service)):
    """Get a specific asset by ID."""
    return unwrap_or_raise(service.get(asset_id))


@router.put("/{asset_id}", response_model=AssetSchema)
@limiter.limit(settings.write_rate_limit)
def update_asset(
    request: Request,
    asset_id: int,
    draft: AssetDraft,
    service: AssetLifecycleService = Depends(get_asset_service),
):
    """
    Update an existing asset.

    Moving an asset into ASSIGNED is rejected here; use the assign endpoint.
    Setting AVAILABLE or RECOVERED clears the employee.
    """
    return unwrap_or_raise(service.update(asset_id, draft))


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(settings.write_rate_limit)
def delete_asset(
    request: Request,
    asset_id: int,
    service: AssetLifecycleService = Depends(get_asset_service),
):
    """Delete an asset. Assigned assets must be recovered first."""
    unwrap_or_raise(service.delete(asset_id))


@router.post("/{asset_id}/assign/{employee_id}", response_model=AssetSchema)
@limiter.limit(settings.write_rate_limit)
def assign_asset(
    request: Request,
    asset_id: int,
    employee_id: int,
    service: AssetLifecycleService = Depends(get_asset_service),
):
    """Assign an AVAILABLE or RECOVERED asset to an employee."""
    return unwrap_or_raise(service.assign(asset_id, employee_id))


@router.post("/{asset_id}/recover", response_model=AssetSchema)
@limiter.limit(settings.write_rate_limit)
def recover_asset(
    request: Request,
    asset_id: int,
    service: AssetLifecycleService = Depends(get_asset_service),
):
    """Recover an assigned asset from its employee."""
    return unwrap_or_raise(service.recover(asset_id))
