"""
Service catalogue endpoints for API v1.

Visitors list the active services shown on the landing page.  Creating,
editing, reordering and deleting services requires the admin
capability.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agency_site_api.app.core.security import require_admin
from agency_site_api.app.schemas.service import (
    ServiceCategory,
    ServiceCreate,
    ServiceRead,
    ServiceReorder,
    ServiceUpdate,
)
from agency_site_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/", response_model=List[ServiceRead])
async def list_active_services(category: Optional[ServiceCategory] = Query(None)) -> List[ServiceRead]:
    """Return active services in display order.  Public."""
    return await CatalogService.get_active_services(category)


@router.get("/all", response_model=List[ServiceRead])
async def list_all_services(current_user: dict = Depends(require_admin)) -> List[ServiceRead]:
    """Return every service, including inactive ones (admin only)."""
    return await CatalogService.get_all_services()


@router.put("/reorder", response_model=List[ServiceRead])
async def reorder_services(
    data: ServiceReorder,
    current_user: dict = Depends(require_admin),
) -> List[ServiceRead]:
    """Set the display order from a list of service ids (admin only)."""
    try:
        return await CatalogService.reorder_services(data.service_ids)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{service_id}", response_model=ServiceRead)
async def get_service(service_id: str) -> ServiceRead:
    service = await CatalogService.get_service(service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.post("/", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
async def create_service(
    data: ServiceCreate,
    current_user: dict = Depends(require_admin),
) -> ServiceRead:
    """Create a new service (admin only)."""
    return await CatalogService.create_service(data)


@router.patch("/{service_id}", response_model=ServiceRead)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    current_user: dict = Depends(require_admin),
) -> ServiceRead:
    """Update the provided fields of a service (admin only)."""
    service = await CatalogService.update_service(service_id, data)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.post("/{service_id}/toggle", response_model=ServiceRead)
async def toggle_service_status(
    service_id: str,
    current_user: dict = Depends(require_admin),
) -> ServiceRead:
    """Flip a service between active and inactive (admin only)."""
    service = await CatalogService.toggle_service_status(service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: str,
    current_user: dict = Depends(require_admin),
) -> None:
    """Delete a service (admin only)."""
    deleted = await CatalogService.delete_service(service_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return None
