"""
Analytics endpoints for API v1.

The site reports events through ``POST /analytics/events`` without
credentials.  Reading the event log, the dashboard aggregates and
pruning old events are admin operations.  Date bounds are epoch
milliseconds.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from agency_site_api.app.core.security import require_admin
from agency_site_api.app.schemas.analytics import AnalyticsEventCreate, AnalyticsEventRead
from agency_site_api.app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.post("/events", status_code=status.HTTP_201_CREATED)
async def track_event(data: AnalyticsEventCreate) -> Dict[str, str]:
    event_id = await AnalyticsService.track_event(data)
    return {"id": event_id}


@router.get("/events", response_model=List[AnalyticsEventRead])
async def list_events(
    event: str = Query(..., min_length=1),
    start: Optional[int] = Query(None, alias="startDate"),
    end: Optional[int] = Query(None, alias="endDate"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    current_user: dict = Depends(require_admin),
) -> List[AnalyticsEventRead]:
    """Events of one type, newest first (admin only)."""
    return await AnalyticsService.get_events_by_type(event, start=start, end=end, limit=limit)


@router.get("/page-views", response_model=List[AnalyticsEventRead])
async def list_page_views(
    path: Optional[str] = Query(None),
    start: Optional[int] = Query(None, alias="startDate"),
    end: Optional[int] = Query(None, alias="endDate"),
    current_user: dict = Depends(require_admin),
) -> List[AnalyticsEventRead]:
    return await AnalyticsService.get_page_views(path=path, start=start, end=end)


@router.get("/dashboard")
async def dashboard(
    start: Optional[int] = Query(None, alias="startDate"),
    end: Optional[int] = Query(None, alias="endDate"),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    return await AnalyticsService.get_dashboard_data(start=start, end=end)


@router.get("/real-time")
async def real_time(current_user: dict = Depends(require_admin)) -> Dict[str, Any]:
    """Activity of the last 24 hours (admin only)."""
    return await AnalyticsService.get_real_time_data()


@router.get("/funnel")
async def conversion_funnel(
    start: Optional[int] = Query(None, alias="startDate"),
    end: Optional[int] = Query(None, alias="endDate"),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    return await AnalyticsService.get_conversion_funnel(start=start, end=end)


@router.get("/sessions/{session_id}", response_model=List[AnalyticsEventRead])
async def user_journey(session_id: str, current_user: dict = Depends(require_admin)) -> List[AnalyticsEventRead]:
    """All events of one session in chronological order (admin only)."""
    return await AnalyticsService.get_user_journey(session_id)


@router.delete("/events")
async def cleanup_old_analytics(
    older_than_days: int = Query(90, ge=1, alias="olderThanDays"),
    current_user: dict = Depends(require_admin),
) -> Dict[str, int]:
    """Delete events older than the given number of days (admin only)."""
    return await AnalyticsService.cleanup_old_analytics(older_than_days)
