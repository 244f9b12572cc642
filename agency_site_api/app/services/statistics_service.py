"""
Service layer for site-wide statistics and search.

This module derives read-only views from the stored collections:
dashboard counters (``get_site_stats``), a liveness probe
(``get_system_health``), popularity rankings from the analytics log
(``get_popular_content``), trends in contact enquiries
(``get_trending_topics``), a substring search across content
(``search_all``) and the static site configuration.

All aggregation happens in Python over full collection reads.  The
time windows are trailing windows of ``days * 86_400_000`` ms ending
now.  Rankings are sorted by count descending with ties kept in order
of first occurrence.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.db import DAY_MS, count_documents, get_documents, now_ms
from agency_site_api.app.schemas.analytics import CONTACT_FORM, PAGE_VIEW, PORTFOLIO_VIEW, SERVICE_INQUIRY
from agency_site_api.app.schemas.contact import ContactRead
from agency_site_api.app.schemas.project import ProjectRead
from agency_site_api.app.schemas.service import ServiceRead
from agency_site_api.app.schemas.testimonial import TestimonialRead
from agency_site_api.app.services.tally import metadata_value, rank, tally


logger = logging.getLogger(__name__)

MIN_SEARCH_LENGTH = 2

SITE_CONFIGURATION: Dict[str, Any] = {
    "site": {
        "name": "Veritron",
        "description": "Premium Development & Design Services",
        "url": "https://veritron.com",
        "logo": "/logo.svg",
    },
    "contact": {
        "email": "hello@veritron.com",
        "phone": "+1 (555) 123-4567",
        "address": "San Francisco, CA",
    },
    "social": {
        "twitter": "@veritron",
        "linkedin": "company/veritron",
        "github": "veritron",
    },
    "features": {
        "analyticsEnabled": True,
        "contactFormEnabled": True,
        "testimonialModeration": True,
        "blogEnabled": False,
    },
}


def _contains(term: str, *values: Optional[str]) -> bool:
    return any(term in value.lower() for value in values if value)


class StatisticsService:
    """Service providing aggregated site statistics."""

    @classmethod
    async def get_site_stats(cls) -> Dict[str, Any]:
        """Return dashboard counters in ``overview``, ``recent`` and ``conversion`` sections.

        The five collections are read concurrently; the reads are
        independent.  ``recent`` counts records strictly newer than
        seven days ago.
        """
        services, projects, contacts, testimonials, analytics = await asyncio.gather(
            *(
                asyncio.to_thread(get_documents, name)
                for name in ("services", "projects", "contacts", "testimonials", "analytics")
            )
        )
        week_ago = now_ms() - 7 * DAY_MS

        def events_of(kind: str) -> int:
            return sum(1 for e in analytics if e["event"] == kind)

        return {
            "overview": {
                "totalServices": len(services),
                "activeServices": sum(1 for s in services if s.get("is_active")),
                "totalProjects": len(projects),
                "publicProjects": sum(1 for p in projects if p.get("is_public")),
                "featuredProjects": sum(1 for p in projects if p.get("featured")),
                "totalContacts": len(contacts),
                "newContacts": sum(1 for c in contacts if c.get("status") == "new"),
                "totalTestimonials": len(testimonials),
                "approvedTestimonials": sum(1 for t in testimonials if t.get("approved")),
                "totalPageViews": events_of(PAGE_VIEW),
            },
            "recent": {
                "contactsThisWeek": sum(1 for c in contacts if c["created_at"] > week_ago),
                "pageViewsThisWeek": sum(
                    1 for e in analytics if e["event"] == PAGE_VIEW and e["timestamp"] > week_ago
                ),
            },
            "conversion": {
                "contactFormSubmissions": events_of(CONTACT_FORM),
                "serviceInquiries": events_of(SERVICE_INQUIRY),
                "portfolioViews": events_of(PORTFOLIO_VIEW),
            },
        }

    @classmethod
    async def get_system_health(cls) -> Dict[str, Any]:
        """Cheap liveness probe.  Never raises.

        On any store failure the result carries ``status: "error"``, the
        error message and ``database.connected = False``.
        """
        try:
            services_count, projects_count, contacts_count = await asyncio.gather(
                *(asyncio.to_thread(count_documents, name) for name in ("services", "projects", "contacts"))
            )
        except Exception as exc:
            logger.exception("Health check failed")
            return {
                "status": "error",
                "timestamp": now_ms(),
                "error": str(exc) or exc.__class__.__name__,
                "database": {"connected": False},
            }
        return {
            "status": "healthy",
            "timestamp": now_ms(),
            "database": {
                "connected": True,
                "tables": {
                    "services": services_count,
                    "projects": projects_count,
                    "contacts": contacts_count,
                },
            },
        }

    @classmethod
    async def get_popular_content(cls, days: int = 30, limit: int = 10) -> Dict[str, List[Dict[str, Any]]]:
        """Rank pages, services and projects by activity within the window.

        Page views are keyed by path, service inquiries by
        ``metadata.serviceName`` and portfolio views by
        ``metadata.projectId``; a missing key counts as ``"unknown"``.
        Each ranking holds at most ``limit`` entries.
        """
        cutoff = now_ms() - days * DAY_MS
        events = get_documents("analytics", predicate=lambda e: e["timestamp"] >= cutoff)

        pages = tally(e.get("path") or "unknown" for e in events if e["event"] == PAGE_VIEW)
        services = tally(metadata_value(e, "serviceName") for e in events if e["event"] == SERVICE_INQUIRY)
        projects = tally(metadata_value(e, "projectId") for e in events if e["event"] == PORTFOLIO_VIEW)

        return {
            "popularPages": rank(pages, "path", "views", limit),
            "popularServices": rank(services, "service", "inquiries", limit),
            "popularProjects": rank(projects, "project", "views", limit),
        }

    @classmethod
    async def get_trending_topics(cls, days: int = 30) -> Dict[str, Any]:
        """Summarise what recent contacts asked about.

        Only contacts created at or after the cutoff contribute.
        ``totalInquiries`` is the number of such contacts.
        """
        cutoff = now_ms() - days * DAY_MS
        contacts = get_documents("contacts", predicate=lambda c: c["created_at"] >= cutoff)

        interests = tally(interest for c in contacts for interest in (c.get("service_interest") or []))
        budgets = tally(c["budget_range"] for c in contacts if c.get("budget_range"))
        timelines = tally(c["timeline"] for c in contacts if c.get("timeline"))

        return {
            "trendingServices": rank(interests, "service", "mentions"),
            "budgetTrends": rank(budgets, "budget", "count"),
            "timelineTrends": rank(timelines, "timeline", "count"),
            "totalInquiries": len(contacts),
        }

    @classmethod
    async def search_all(
        cls,
        query: str,
        limit: int = 20,
        include_contacts: bool = False,
    ) -> Dict[str, List[Any]]:
        """Case-insensitive substring search across content collections.

        Queries shorter than two characters (after trimming) return
        empty results.  Contacts hold personal data and are searched
        only when ``include_contacts`` is set, which the API does for
        admin callers.  Each category is truncated to ``limit`` in
        collection order.
        """
        term = query.strip().lower()
        results: Dict[str, List[Any]] = {"services": [], "projects": [], "testimonials": [], "contacts": []}
        if len(term) < MIN_SEARCH_LENGTH:
            return results

        services = get_documents(
            "services",
            predicate=lambda s: _contains(term, s["title"], s["description"], *s.get("features", [])),
            limit=limit,
        )
        projects = get_documents(
            "projects",
            predicate=lambda p: _contains(
                term, p["title"], p["description"], p["short_description"], *p.get("technologies", [])
            ),
            limit=limit,
        )
        testimonials = get_documents(
            "testimonials",
            predicate=lambda t: _contains(term, t["client_name"], t["client_company"], t["testimonial"]),
            limit=limit,
        )
        results["services"] = [ServiceRead.model_validate(s) for s in services]
        results["projects"] = [ProjectRead.model_validate(p) for p in projects]
        results["testimonials"] = [TestimonialRead.model_validate(t) for t in testimonials]

        if include_contacts:
            contacts = get_documents(
                "contacts",
                predicate=lambda c: _contains(term, c["name"], c["email"], c.get("company"), c["subject"]),
                limit=limit,
            )
            results["contacts"] = [ContactRead.model_validate(c) for c in contacts]
        return results

    @classmethod
    async def get_configuration(cls) -> Dict[str, Any]:
        """Return the site configuration.  A fresh copy on every call."""
        return copy.deepcopy(SITE_CONFIGURATION)
