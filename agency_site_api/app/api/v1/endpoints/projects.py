"""
Portfolio endpoints for API v1.

Public routes only ever return projects flagged ``is_public``.  The
admin routes see and manage every project.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agency_site_api.app.core.security import require_admin
from agency_site_api.app.schemas.project import ProjectCategory, ProjectCreate, ProjectRead, ProjectUpdate
from agency_site_api.app.services.project_service import ProjectService

router = APIRouter()


def _found(project: Optional[ProjectRead]) -> ProjectRead:
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.get("/", response_model=List[ProjectRead])
async def list_public_projects(
    category: Optional[ProjectCategory] = Query(None),
    featured: bool = Query(False, description="Only featured projects"),
    limit: Optional[int] = Query(None, ge=1, le=100),
) -> List[ProjectRead]:
    """Return public projects.  Category and featured filters combine."""
    return await ProjectService.get_public_projects(category=category, featured_only=featured, limit=limit)


@router.get("/featured", response_model=List[ProjectRead])
async def list_featured_projects(limit: Optional[int] = Query(None, ge=1, le=100)) -> List[ProjectRead]:
    return await ProjectService.get_featured_projects(limit)


@router.get("/categories")
async def list_project_categories() -> List[Dict[str, Any]]:
    """Number of public projects per category."""
    return await ProjectService.get_project_categories()


@router.get("/technology/{technology}", response_model=List[ProjectRead])
async def list_projects_by_technology(
    technology: str,
    limit: Optional[int] = Query(None, ge=1, le=100),
) -> List[ProjectRead]:
    return await ProjectService.get_projects_by_technology(technology, limit)


@router.get("/all", response_model=List[ProjectRead])
async def list_all_projects(current_user: dict = Depends(require_admin)) -> List[ProjectRead]:
    """Return every project, newest first (admin only)."""
    return await ProjectService.get_all_projects()


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: str) -> ProjectRead:
    return _found(await ProjectService.get_project(project_id))


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    current_user: dict = Depends(require_admin),
) -> ProjectRead:
    """Create a project (admin only)."""
    return await ProjectService.create_project(data)


@router.patch("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    current_user: dict = Depends(require_admin),
) -> ProjectRead:
    return _found(await ProjectService.update_project(project_id, data))


@router.post("/{project_id}/toggle-featured", response_model=ProjectRead)
async def toggle_project_featured(
    project_id: str,
    current_user: dict = Depends(require_admin),
) -> ProjectRead:
    return _found(await ProjectService.toggle_project_featured(project_id))


@router.post("/{project_id}/toggle-public", response_model=ProjectRead)
async def toggle_project_public(
    project_id: str,
    current_user: dict = Depends(require_admin),
) -> ProjectRead:
    return _found(await ProjectService.toggle_project_public(project_id))


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    current_user: dict = Depends(require_admin),
) -> None:
    """Delete a project (admin only)."""
    if not await ProjectService.delete_project(project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return None
