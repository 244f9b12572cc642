"""
Tests for site-wide statistics, rankings and search.
"""

import sqlite3

import pytest

from agency_site_api.app.core import db
from agency_site_api.app.core.db import DAY_MS, create_document, create_documents, now_ms
from agency_site_api.app.services.seed_service import SeedService
from agency_site_api.app.services.statistics_service import StatisticsService


def contact(created_at, **fields):
    document = {
        "name": "Client",
        "email": "client@example.com",
        "subject": "Project",
        "message": "Hello",
        "status": "new",
        "priority": "medium",
        "is_read": False,
        "created_at": created_at,
        "updated_at": created_at,
    }
    document.update(fields)
    return document


@pytest.mark.asyncio
async def test_site_stats_on_empty_store():
    stats = await StatisticsService.get_site_stats()

    assert stats["overview"]["totalServices"] == 0
    assert stats["recent"] == {"contactsThisWeek": 0, "pageViewsThisWeek": 0}
    assert stats["conversion"] == {"contactFormSubmissions": 0, "serviceInquiries": 0, "portfolioViews": 0}


@pytest.mark.asyncio
async def test_site_stats_after_seeding(low_rng):
    await SeedService.seed_all(rng=low_rng)

    stats = await StatisticsService.get_site_stats()

    overview = stats["overview"]
    assert overview["totalServices"] == 3
    assert overview["activeServices"] == 3
    assert overview["totalProjects"] == 8
    assert overview["publicProjects"] == 8
    assert overview["featuredProjects"] == 3
    assert overview["totalTestimonials"] == 5
    assert overview["approvedTestimonials"] == 5
    assert overview["totalContacts"] == 3
    assert overview["newContacts"] == 1
    assert overview["totalPageViews"] == 31 * 50
    assert stats["conversion"] == {"contactFormSubmissions": 0, "serviceInquiries": 31 * 5, "portfolioViews": 31 * 10}
    assert stats["recent"]["contactsThisWeek"] == 3


@pytest.mark.asyncio
async def test_site_stats_after_clearing(low_rng):
    await SeedService.seed_all(rng=low_rng)
    await SeedService.clear_all()

    stats = await StatisticsService.get_site_stats()

    assert all(count == 0 for count in stats["overview"].values())


@pytest.mark.asyncio
async def test_recent_window_is_exclusive_of_old_records():
    now = now_ms()
    create_documents(
        "contacts",
        [contact(now - DAY_MS), contact(now - 8 * DAY_MS)],
    )
    create_documents(
        "analytics",
        [
            {"event": "page_view", "path": "/", "timestamp": now - 1000},
            {"event": "page_view", "path": "/", "timestamp": now - 10 * DAY_MS},
        ],
    )

    recent = (await StatisticsService.get_site_stats())["recent"]

    assert recent == {"contactsThisWeek": 1, "pageViewsThisWeek": 1}


@pytest.mark.asyncio
async def test_system_health_reports_counts():
    create_document("services", {"title": "Web"})

    health = await StatisticsService.get_system_health()

    assert health["status"] == "healthy"
    assert health["database"] == {"connected": True, "tables": {"services": 1, "projects": 0, "contacts": 0}}
    assert isinstance(health["timestamp"], int)


@pytest.mark.asyncio
async def test_system_health_reports_store_failure(monkeypatch):
    def broken_connection():
        raise sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr(db, "get_connection", broken_connection)

    health = await StatisticsService.get_system_health()

    assert health["status"] == "error"
    assert health["error"] == "unable to open database file"
    assert health["database"] == {"connected": False}


@pytest.mark.asyncio
async def test_popular_content_ranks_and_limits():
    now = now_ms()
    events = [
        {"event": "page_view", "path": "/services", "timestamp": now},
        {"event": "page_view", "path": "/", "timestamp": now},
        {"event": "page_view", "path": "/", "timestamp": now},
        {"event": "page_view", "path": "/about", "timestamp": now},
        {"event": "page_view", "timestamp": now},
        {"event": "page_view", "path": "/old", "timestamp": now - 40 * DAY_MS},
        {"event": "service_inquiry", "metadata": {"serviceName": "Web Development"}, "timestamp": now},
        {"event": "service_inquiry", "metadata": {}, "timestamp": now},
        {"event": "portfolio_view", "metadata": {"projectId": "project_2"}, "timestamp": now},
        {"event": "portfolio_view", "metadata": {"projectId": "project_2"}, "timestamp": now},
        {"event": "portfolio_view", "metadata": {"projectId": "project_1"}, "timestamp": now},
    ]
    create_documents("analytics", events)

    popular = await StatisticsService.get_popular_content(limit=3)

    # Equal counts keep the order in which paths were first seen.
    assert popular["popularPages"] == [
        {"path": "/", "views": 2},
        {"path": "/services", "views": 1},
        {"path": "/about", "views": 1},
    ]
    assert popular["popularServices"] == [
        {"service": "Web Development", "inquiries": 1},
        {"service": "unknown", "inquiries": 1},
    ]
    assert popular["popularProjects"] == [
        {"project": "project_2", "views": 2},
        {"project": "project_1", "views": 1},
    ]

    wider = await StatisticsService.get_popular_content(days=60, limit=10)
    assert {"path": "unknown", "views": 1} in wider["popularPages"]
    assert {"path": "/old", "views": 1} in wider["popularPages"]


@pytest.mark.asyncio
async def test_trending_topics_only_counts_recent_contacts():
    now = now_ms()
    create_documents(
        "contacts",
        [
            contact(now, service_interest=["Web Development", "UI/UX Design"], budget_range="15k-50k", timeline="asap"),
            contact(now - DAY_MS, service_interest=["Web Development"], budget_range="15k-50k"),
            contact(now - 2 * DAY_MS, timeline="3-months"),
            contact(now - 45 * DAY_MS, service_interest=["Cloud"], budget_range="50k-plus"),
        ],
    )

    trending = await StatisticsService.get_trending_topics()

    assert trending["totalInquiries"] == 3
    assert trending["trendingServices"] == [
        {"service": "Web Development", "mentions": 2},
        {"service": "UI/UX Design", "mentions": 1},
    ]
    assert trending["budgetTrends"] == [{"budget": "15k-50k", "count": 2}]
    assert trending["timelineTrends"] == [{"timeline": "asap", "count": 1}, {"timeline": "3-months", "count": 1}]


@pytest.mark.asyncio
async def test_search_requires_two_characters(low_rng):
    await SeedService.seed_all(rng=low_rng)

    for query in ("a", "  a  ", ""):
        results = await StatisticsService.search_all(query, include_contacts=True)
        assert results == {"services": [], "projects": [], "testimonials": [], "contacts": []}


@pytest.mark.asyncio
async def test_search_matches_case_insensitively():
    await SeedService.seed_services()
    await SeedService.seed_projects()
    await SeedService.seed_testimonials()

    results = await StatisticsService.search_all("  AI  ")

    assert "AI & Machine Learning" in [s.title for s in results["services"]]
    assert "AI Content Generator" in [p.title for p in results["projects"]]
    assert results["contacts"] == []


@pytest.mark.asyncio
async def test_search_contacts_only_when_requested():
    await SeedService.seed_contacts()

    hidden = await StatisticsService.search_all("garcia")
    shown = await StatisticsService.search_all("garcia", include_contacts=True)

    assert hidden["contacts"] == []
    assert [c.name for c in shown["contacts"]] == ["Robert Garcia"]


@pytest.mark.asyncio
async def test_search_limit_applies_per_category():
    await SeedService.seed_projects()

    results = await StatisticsService.search_all("react", limit=2)

    assert len(results["projects"]) == 2


@pytest.mark.asyncio
async def test_configuration_is_a_fresh_copy():
    config = await StatisticsService.get_configuration()
    config["site"]["name"] = "Changed"

    again = await StatisticsService.get_configuration()

    assert again["site"]["name"] == "Veritron"
    assert again["features"]["analyticsEnabled"] is True
