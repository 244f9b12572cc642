"""
Service layer for the analytics event log.

Events are appended by the public site (``track_event``) and read back
by the admin dashboard: per-type listings, page views, daily and
hourly breakdowns, session journeys and the conversion funnel.  Date
bounds are epoch milliseconds; ``None`` means unbounded.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.db import DAY_MS, create_document, delete_documents, get_documents, now_ms
from agency_site_api.app.schemas.analytics import (
    CONTACT_FORM,
    PAGE_VIEW,
    PORTFOLIO_VIEW,
    SERVICE_INQUIRY,
    AnalyticsEventCreate,
    AnalyticsEventRead,
)
from agency_site_api.app.services.tally import rank, tally


COLLECTION = "analytics"
HOUR_MS = 60 * 60 * 1000

logger = logging.getLogger(__name__)


def _within(timestamp: int, start: Optional[int], end: Optional[int]) -> bool:
    if start is not None and timestamp < start:
        return False
    if end is not None and timestamp > end:
        return False
    return True


def _bucket_counts(events: List[Dict[str, Any]]) -> Dict[str, int]:
    return {
        "pageViews": sum(1 for e in events if e["event"] == PAGE_VIEW),
        "contacts": sum(1 for e in events if e["event"] == CONTACT_FORM),
        "inquiries": sum(1 for e in events if e["event"] == SERVICE_INQUIRY),
    }


def _rate(numerator: int, denominator: int) -> str:
    return f"{numerator / denominator * 100:.2f}" if denominator > 0 else "0"


class AnalyticsService:
    """Service class for recording and reading analytics events."""

    @classmethod
    async def track_event(cls, data: AnalyticsEventCreate) -> str:
        """Append an event stamped with the current server time."""
        document = data.model_dump()
        document["timestamp"] = now_ms()
        event_id = create_document(COLLECTION, document)
        logger.debug("Tracked %s event %s", data.event, event_id)
        return event_id

    @classmethod
    async def get_events_by_type(
        cls,
        event: str,
        start: Optional[int] = None,
        end: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[AnalyticsEventRead]:
        """Return events of one type, newest first."""
        documents = get_documents(
            COLLECTION, {"event": event}, predicate=lambda d: _within(d["timestamp"], start, end)
        )
        documents.sort(key=lambda d: d["timestamp"], reverse=True)
        if limit:
            documents = documents[:limit]
        return [AnalyticsEventRead.model_validate(d) for d in documents]

    @classmethod
    async def get_page_views(
        cls,
        path: Optional[str] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[AnalyticsEventRead]:
        filters: Dict[str, Any] = {"event": PAGE_VIEW}
        if path:
            filters["path"] = path
        documents = get_documents(
            COLLECTION, filters, predicate=lambda d: _within(d["timestamp"], start, end)
        )
        return [AnalyticsEventRead.model_validate(d) for d in documents]

    @classmethod
    async def get_dashboard_data(
        cls, start: Optional[int] = None, end: Optional[int] = None
    ) -> Dict[str, Any]:
        """Summarise the event log for the admin dashboard.

        Includes totals, the ten most viewed pages, the ten most common
        referrers (``direct`` when none was sent), a 30-day daily
        breakdown ending today and the number of distinct sessions.
        """
        events = get_documents(COLLECTION, predicate=lambda d: _within(d["timestamp"], start, end))
        page_views = [e for e in events if e["event"] == PAGE_VIEW]

        now = now_ms()
        daily: List[Dict[str, Any]] = []
        for offset in range(29, -1, -1):
            day_start = now - offset * DAY_MS
            day_end = day_start + DAY_MS
            day_events = [e for e in events if day_start <= e["timestamp"] < day_end]
            date = datetime.fromtimestamp(day_start / 1000, tz=timezone.utc).date().isoformat()
            daily.append({"date": date, **_bucket_counts(day_events)})

        return {
            "totalEvents": len(events),
            "totalPageViews": len(page_views),
            "totalContacts": sum(1 for e in events if e["event"] == CONTACT_FORM),
            "totalInquiries": sum(1 for e in events if e["event"] == SERVICE_INQUIRY),
            "topPages": rank(tally(e.get("path") or "unknown" for e in page_views), "path", "count", 10),
            "topReferrers": rank(tally(e.get("referrer") or "direct" for e in events), "referrer", "count", 10),
            "dailyData": daily,
            "uniqueSessions": len({e["session_id"] for e in events if e.get("session_id")}),
        }

    @classmethod
    async def get_real_time_data(cls) -> Dict[str, Any]:
        """Events of the last 24 hours, bucketed by hour, plus the 20 most recent."""
        now = now_ms()
        since = now - DAY_MS
        events = get_documents(COLLECTION, predicate=lambda d: d["timestamp"] >= since)

        hourly: List[Dict[str, Any]] = []
        for offset in range(23, -1, -1):
            hour_start = now - offset * HOUR_MS
            hour_end = hour_start + HOUR_MS
            hour_events = [e for e in events if hour_start <= e["timestamp"] < hour_end]
            hour = datetime.fromtimestamp(hour_start / 1000, tz=timezone.utc).hour
            hourly.append({"hour": hour, **_bucket_counts(hour_events)})

        recent = sorted(events, key=lambda d: d["timestamp"], reverse=True)[:20]
        return {
            "last24Hours": len(events),
            "hourlyData": hourly,
            "recentEvents": [AnalyticsEventRead.model_validate(e) for e in recent],
        }

    @classmethod
    async def cleanup_old_analytics(cls, older_than_days: int) -> Dict[str, int]:
        """Delete events older than the given number of days."""
        cutoff = now_ms() - older_than_days * DAY_MS
        stale = get_documents(COLLECTION, predicate=lambda d: d["timestamp"] < cutoff)
        deleted = delete_documents(COLLECTION, [e["id"] for e in stale])
        logger.info("Removed %s analytics events older than %s days", deleted, older_than_days)
        return {"deletedCount": deleted}

    @classmethod
    async def get_user_journey(cls, session_id: str) -> List[AnalyticsEventRead]:
        """Return every event of one session in chronological order."""
        documents = get_documents(COLLECTION, {"session_id": session_id})
        documents.sort(key=lambda d: d["timestamp"])
        return [AnalyticsEventRead.model_validate(d) for d in documents]

    @classmethod
    async def get_conversion_funnel(
        cls, start: Optional[int] = None, end: Optional[int] = None
    ) -> Dict[str, Any]:
        """Step counts from landing to contact submission, with conversion rates in percent."""
        events = get_documents(COLLECTION, predicate=lambda d: _within(d["timestamp"], start, end))
        page_views = sum(1 for e in events if e["event"] == PAGE_VIEW)
        service_views = sum(1 for e in events if e["event"] == "service_view")
        portfolio_views = sum(1 for e in events if e["event"] == PORTFOLIO_VIEW)
        contact_page_views = sum(
            1 for e in events if e["event"] == PAGE_VIEW and e.get("path") == "/contact"
        )
        submissions = sum(1 for e in events if e["event"] == CONTACT_FORM)
        return {
            "steps": [
                {"name": "Landing Page Views", "count": page_views},
                {"name": "Services Viewed", "count": service_views},
                {"name": "Portfolio Viewed", "count": portfolio_views},
                {"name": "Contact Page Views", "count": contact_page_views},
                {"name": "Contact Form Submissions", "count": submissions},
            ],
            "conversionRates": {
                "serviceViewRate": _rate(service_views, page_views),
                "portfolioViewRate": _rate(portfolio_views, page_views),
                "contactPageRate": _rate(contact_page_views, page_views),
                "contactSubmissionRate": _rate(submissions, contact_page_views),
                "overallConversionRate": _rate(submissions, page_views),
            },
        }
