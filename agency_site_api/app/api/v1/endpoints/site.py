"""
Site-wide statistics endpoints for API v1.

Counters, popularity rankings, trends and the site configuration are
public.  Search is public too, but contact submissions only appear in
its results for callers holding the admin capability.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from agency_site_api.app.core.security import is_admin
from agency_site_api.app.schemas.site import SearchResults
from agency_site_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/stats")
async def site_stats() -> Dict[str, Any]:
    """Return ``overview``, ``recent`` and ``conversion`` counters."""
    return await StatisticsService.get_site_stats()


@router.get("/health")
async def system_health() -> Dict[str, Any]:
    """Liveness probe.  Reports ``status: "error"`` instead of failing."""
    return await StatisticsService.get_system_health()


@router.get("/popular")
async def popular_content(
    days: int = Query(30, ge=1, le=365),
    limit: int = Query(10, ge=1, le=100),
) -> Dict[str, Any]:
    return await StatisticsService.get_popular_content(days=days, limit=limit)


@router.get("/trending")
async def trending_topics(days: int = Query(30, ge=1, le=365)) -> Dict[str, Any]:
    return await StatisticsService.get_trending_topics(days=days)


@router.get("/search", response_model=SearchResults)
async def search(
    q: str = Query(..., description="Search term, at least two characters"),
    limit: int = Query(20, ge=1, le=100),
    admin: bool = Depends(is_admin),
) -> Dict[str, Any]:
    """Case-insensitive substring search across services, projects and testimonials.

    Contacts are searched only for admin callers.
    """
    return await StatisticsService.search_all(q, limit=limit, include_contacts=admin)


@router.get("/configuration")
async def configuration() -> Dict[str, Any]:
    return await StatisticsService.get_configuration()
