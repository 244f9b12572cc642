"""
Service layer for client testimonials.

Newly created testimonials are unapproved unless the caller says
otherwise; only approved ones are listed publicly.  Ratings are
constrained to 1..5 by the schemas.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.db import (
    create_document,
    delete_document,
    get_document,
    get_documents,
    now_ms,
    update_document,
)
from agency_site_api.app.schemas.testimonial import TestimonialCreate, TestimonialRead, TestimonialUpdate
from agency_site_api.app.services.catalog_service import next_sort_order


COLLECTION = "testimonials"

logger = logging.getLogger(__name__)


class TestimonialService:
    """Service class for managing testimonials."""

    @classmethod
    async def get_approved_testimonials(
        cls,
        featured_only: bool = False,
        limit: Optional[int] = None,
        min_rating: Optional[int] = None,
    ) -> List[TestimonialRead]:
        """Return approved testimonials ordered by ``sort_order`` then rating (highest first)."""
        filters: Dict[str, Any] = {"approved": True}
        if featured_only:
            filters["featured"] = True
        documents = get_documents(COLLECTION, filters)
        if min_rating:
            documents = [d for d in documents if d["rating"] >= min_rating]
        documents.sort(key=lambda d: (d["sort_order"], -d["rating"]))
        if limit is not None:
            documents = documents[:limit]
        return [TestimonialRead.model_validate(d) for d in documents]

    @classmethod
    async def get_all_testimonials(cls) -> List[TestimonialRead]:
        documents = get_documents(COLLECTION)
        documents.sort(key=lambda d: d["created_at"], reverse=True)
        return [TestimonialRead.model_validate(d) for d in documents]

    @classmethod
    async def get_testimonial(cls, testimonial_id: str) -> Optional[TestimonialRead]:
        document = get_document(COLLECTION, testimonial_id)
        return TestimonialRead.model_validate(document) if document else None

    @classmethod
    async def create_testimonial(cls, data: TestimonialCreate) -> TestimonialRead:
        now = now_ms()
        sort_order = data.sort_order
        if sort_order is None:
            sort_order = next_sort_order(get_documents(COLLECTION))
        document = data.model_dump(exclude={"sort_order"})
        document.update(
            {
                "featured": bool(data.featured),
                "approved": bool(data.approved),
                "sort_order": sort_order,
                "created_at": now,
                "updated_at": now,
            }
        )
        testimonial_id = create_document(COLLECTION, document)
        logger.info("Created testimonial %s", testimonial_id)
        return TestimonialRead.model_validate({**document, "id": testimonial_id})

    @classmethod
    async def update_testimonial(
        cls, testimonial_id: str, data: TestimonialUpdate
    ) -> Optional[TestimonialRead]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_at"] = now_ms()
        document = update_document(COLLECTION, testimonial_id, changes)
        if document is None:
            return None
        logger.info("Updated testimonial %s", testimonial_id)
        return TestimonialRead.model_validate(document)

    @classmethod
    async def _toggle(cls, testimonial_id: str, field: str) -> Optional[TestimonialRead]:
        current = get_document(COLLECTION, testimonial_id)
        if current is None:
            return None
        document = update_document(
            COLLECTION, testimonial_id, {field: not current[field], "updated_at": now_ms()}
        )
        return TestimonialRead.model_validate(document)

    @classmethod
    async def toggle_testimonial_approval(cls, testimonial_id: str) -> Optional[TestimonialRead]:
        return await cls._toggle(testimonial_id, "approved")

    @classmethod
    async def toggle_testimonial_featured(cls, testimonial_id: str) -> Optional[TestimonialRead]:
        return await cls._toggle(testimonial_id, "featured")

    @classmethod
    async def delete_testimonial(cls, testimonial_id: str) -> bool:
        deleted = delete_document(COLLECTION, testimonial_id)
        if deleted:
            logger.info("Deleted testimonial %s", testimonial_id)
        return deleted

    @classmethod
    async def get_testimonials_by_rating(
        cls, rating: int, approved_only: bool = False
    ) -> List[TestimonialRead]:
        filters: Dict[str, Any] = {"rating": rating}
        if approved_only:
            filters["approved"] = True
        return [TestimonialRead.model_validate(d) for d in get_documents(COLLECTION, filters)]

    @classmethod
    async def get_testimonial_stats(cls) -> Dict[str, Any]:
        """Return counts, the average rating (one decimal) and the rating distribution."""
        documents = get_documents(COLLECTION)
        total = len(documents)
        # Half-up rounding to one decimal.
        average = math.floor(sum(d["rating"] for d in documents) / total * 10 + 0.5) / 10 if total else 0
        return {
            "total": total,
            "approved": sum(1 for d in documents if d["approved"]),
            "featured": sum(1 for d in documents if d["featured"]),
            "pending": sum(1 for d in documents if not d["approved"]),
            "averageRating": average,
            "ratingDistribution": {
                str(stars): sum(1 for d in documents if d["rating"] == stars) for stars in (5, 4, 3, 2, 1)
            },
        }
