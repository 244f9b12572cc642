"""
Demo data endpoints for API v1 (admin only).

``POST /seed`` loads every fixture set; the per-collection routes load
one set each.  ``DELETE /seed`` empties every collection.  Seeding is
additive, so clear first to get a predictable store.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from agency_site_api.app.core.security import require_admin
from agency_site_api.app.services.seed_service import SeedService

router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/")
async def seed_all() -> Dict[str, int]:
    return await SeedService.seed_all()


@router.post("/services")
async def seed_services() -> Dict[str, Any]:
    return await SeedService.seed_services()


@router.post("/projects")
async def seed_projects() -> Dict[str, Any]:
    return await SeedService.seed_projects()


@router.post("/testimonials")
async def seed_testimonials() -> Dict[str, Any]:
    return await SeedService.seed_testimonials()


@router.post("/contacts")
async def seed_contacts() -> Dict[str, Any]:
    return await SeedService.seed_contacts()


@router.post("/analytics")
async def seed_analytics() -> Dict[str, Any]:
    """Generate a month of synthetic analytics events."""
    return await SeedService.seed_analytics()


@router.delete("/")
async def clear_all() -> Dict[str, int]:
    """Delete every record in every collection."""
    return await SeedService.clear_all()
