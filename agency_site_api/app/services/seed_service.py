"""
Service layer for demo data.

Seeding is additive: running ``seed_all`` twice inserts every fixture
twice.  ``clear_all`` followed by ``seed_all`` resets the store to a
known shape.  Analytics volumes are random within fixed per-day ranges;
pass a seeded ``random.Random`` (or set ``SEED_RANDOM_SEED``) to make
them reproducible.
"""

from __future__ import annotations

import logging
import random
import string
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.config import settings
from agency_site_api.app.core.db import COLLECTIONS, DAY_MS, create_documents, delete_documents, now_ms
from agency_site_api.app.schemas.analytics import CONTACT_FORM, PAGE_VIEW, PORTFOLIO_VIEW, SERVICE_INQUIRY
from agency_site_api.app.services.seed_fixtures import (
    contact_fixtures,
    project_fixtures,
    service_fixtures,
    testimonial_fixtures,
)


logger = logging.getLogger(__name__)

ANALYTICS_DAYS = 30
SEED_PAGES = ["/", "/services", "/portfolio", "/contact", "/about"]
SEED_REFERRERS = ["https://google.com", "https://linkedin.com", None, "https://github.com"]
SEED_SERVICE_NAMES = ["Web Development", "Mobile Development", "AI & Machine Learning", "UI/UX Design"]
SEED_PROJECT_COUNT = 8

# Inclusive per-day ranges for each generated event type.
PAGE_VIEWS_PER_DAY = (50, 149)
CONTACT_FORMS_PER_DAY = (0, 4)
SERVICE_INQUIRIES_PER_DAY = (5, 14)
PORTFOLIO_VIEWS_PER_DAY = (10, 29)

_SESSION_ALPHABET = string.digits + string.ascii_lowercase


def _session_id(rng: random.Random) -> str:
    return "session_" + "".join(rng.choice(_SESSION_ALPHABET) for _ in range(9))


def _insert(collection: str, documents: List[Dict[str, Any]]) -> Dict[str, Any]:
    ids = create_documents(collection, documents)
    logger.info("Seeded %s %s", len(ids), collection)
    return {"created": len(ids), "ids": ids}


class SeedService:
    """Service class for loading and clearing demo data."""

    @classmethod
    async def seed_services(cls) -> Dict[str, Any]:
        return _insert("services", service_fixtures(now_ms()))

    @classmethod
    async def seed_projects(cls) -> Dict[str, Any]:
        return _insert("projects", project_fixtures(now_ms()))

    @classmethod
    async def seed_testimonials(cls) -> Dict[str, Any]:
        return _insert("testimonials", testimonial_fixtures(now_ms()))

    @classmethod
    async def seed_contacts(cls) -> Dict[str, Any]:
        return _insert("contacts", contact_fixtures(now_ms()))

    @classmethod
    async def seed_analytics(cls, rng: Optional[random.Random] = None) -> Dict[str, Any]:
        """Generate synthetic events for each of the last 31 days (offsets 30..0).

        Per day: 50-149 page views, 0-4 contact form submissions, 5-14
        service inquiries and 10-29 portfolio views, each at a uniformly
        random time within the day and with its own session id.
        """
        if rng is None:
            rng = random.Random(settings.seed_random_seed)
        now = now_ms()
        events: List[Dict[str, Any]] = []

        def event(kind: str, day_start: int, **fields: Any) -> Dict[str, Any]:
            return {
                "event": kind,
                "session_id": _session_id(rng),
                "timestamp": int(day_start + rng.random() * DAY_MS),
                **fields,
            }

        for day in range(ANALYTICS_DAYS, -1, -1):
            day_start = now - day * DAY_MS

            for _ in range(rng.randint(*PAGE_VIEWS_PER_DAY)):
                path = rng.choice(SEED_PAGES)
                referrer = rng.choice(SEED_REFERRERS)
                events.append(event(PAGE_VIEW, day_start, path=path, referrer=referrer))

            for _ in range(rng.randint(*CONTACT_FORMS_PER_DAY)):
                events.append(event(CONTACT_FORM, day_start, path="/contact"))

            for _ in range(rng.randint(*SERVICE_INQUIRIES_PER_DAY)):
                service_name = rng.choice(SEED_SERVICE_NAMES)
                events.append(
                    event(SERVICE_INQUIRY, day_start, path="/services", metadata={"serviceName": service_name})
                )

            for _ in range(rng.randint(*PORTFOLIO_VIEWS_PER_DAY)):
                project_id = f"project_{rng.randint(1, SEED_PROJECT_COUNT)}"
                events.append(
                    event(PORTFOLIO_VIEW, day_start, path="/portfolio", metadata={"projectId": project_id})
                )

        return _insert("analytics", events)

    @classmethod
    async def seed_all(cls, rng: Optional[random.Random] = None) -> Dict[str, int]:
        """Run every seeder and return the number of records each created."""
        results = {
            "services": await cls.seed_services(),
            "projects": await cls.seed_projects(),
            "testimonials": await cls.seed_testimonials(),
            "contacts": await cls.seed_contacts(),
            "analytics": await cls.seed_analytics(rng),
        }
        counts = {name: result["created"] for name, result in results.items()}
        counts["total"] = sum(counts.values())
        logger.info("Seeded %s records in total", counts["total"])
        return counts

    @classmethod
    async def clear_all(cls) -> Dict[str, int]:
        """Delete every record in every collection."""
        counts = {name: delete_documents(name) for name in COLLECTIONS}
        logger.info("Cleared collections: %s", counts)
        return counts
