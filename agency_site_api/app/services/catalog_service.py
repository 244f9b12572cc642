"""
Service layer for the services catalogue.

Provides the public listing of active services (optionally by
category) and the admin operations to create, edit, toggle, reorder
and delete services.  New services without an explicit ``sort_order``
are appended after the current last one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.db import (
    create_document,
    delete_document,
    get_document,
    get_documents,
    now_ms,
    update_document,
)
from agency_site_api.app.schemas.service import ServiceCreate, ServiceRead, ServiceUpdate


COLLECTION = "services"

logger = logging.getLogger(__name__)


def next_sort_order(documents: List[Dict[str, Any]]) -> int:
    """Return one past the highest ``sort_order`` (never below 1)."""
    return max([doc.get("sort_order", 0) for doc in documents] + [0]) + 1


class CatalogService:
    """Service class for managing the agency's service offerings."""

    @classmethod
    async def get_active_services(cls, category: Optional[str] = None) -> List[ServiceRead]:
        """Return active services ordered by ``sort_order``."""
        filters: Dict[str, Any] = {"is_active": True}
        if category:
            filters["category"] = category
        documents = get_documents(COLLECTION, filters)
        documents.sort(key=lambda d: d["sort_order"])
        return [ServiceRead.model_validate(d) for d in documents]

    @classmethod
    async def get_all_services(cls) -> List[ServiceRead]:
        documents = get_documents(COLLECTION)
        documents.sort(key=lambda d: d["sort_order"])
        return [ServiceRead.model_validate(d) for d in documents]

    @classmethod
    async def get_service(cls, service_id: str) -> Optional[ServiceRead]:
        document = get_document(COLLECTION, service_id)
        return ServiceRead.model_validate(document) if document else None

    @classmethod
    async def create_service(cls, data: ServiceCreate) -> ServiceRead:
        """Insert a new service and return the created record."""
        now = now_ms()
        sort_order = data.sort_order
        if sort_order is None:
            sort_order = next_sort_order(get_documents(COLLECTION))
        document = {
            "title": data.title,
            "description": data.description,
            "icon": data.icon,
            "category": data.category,
            "features": list(data.features),
            "is_active": True if data.is_active is None else data.is_active,
            "sort_order": sort_order,
            "created_at": now,
            "updated_at": now,
        }
        service_id = create_document(COLLECTION, document)
        logger.info("Created service %s", service_id)
        return ServiceRead.model_validate({**document, "id": service_id})

    @classmethod
    async def update_service(cls, service_id: str, data: ServiceUpdate) -> Optional[ServiceRead]:
        """Apply the provided fields.  Returns ``None`` if the service does not exist."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_at"] = now_ms()
        document = update_document(COLLECTION, service_id, changes)
        if document is None:
            return None
        logger.info("Updated service %s", service_id)
        return ServiceRead.model_validate(document)

    @classmethod
    async def delete_service(cls, service_id: str) -> bool:
        deleted = delete_document(COLLECTION, service_id)
        if deleted:
            logger.info("Deleted service %s", service_id)
        return deleted

    @classmethod
    async def toggle_service_status(cls, service_id: str) -> Optional[ServiceRead]:
        """Flip ``is_active``.  Returns ``None`` if the service does not exist."""
        current = get_document(COLLECTION, service_id)
        if current is None:
            return None
        document = update_document(
            COLLECTION,
            service_id,
            {"is_active": not current["is_active"], "updated_at": now_ms()},
        )
        return ServiceRead.model_validate(document)

    @classmethod
    async def reorder_services(cls, service_ids: List[str]) -> List[ServiceRead]:
        """Assign ``sort_order`` from each id's position in ``service_ids``.

        Raises ``ValueError`` if any id is unknown; in that case nothing
        is changed.
        """
        known = {doc["id"] for doc in get_documents(COLLECTION)}
        missing = [sid for sid in service_ids if sid not in known]
        if missing:
            raise ValueError(f"Unknown service ids: {', '.join(missing)}")
        now = now_ms()
        for index, service_id in enumerate(service_ids):
            update_document(COLLECTION, service_id, {"sort_order": index, "updated_at": now})
        logger.info("Reordered %s services", len(service_ids))
        return await cls.get_all_services()
