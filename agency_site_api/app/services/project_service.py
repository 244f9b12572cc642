"""
Service layer for portfolio projects.

Public listings only ever include projects with ``is_public`` set.
They are ordered by ``sort_order`` and, within the same position, by
completion time (falling back to creation time) newest first.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.db import (
    create_document,
    delete_document,
    get_document,
    get_documents,
    now_ms,
    update_document,
)
from agency_site_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from agency_site_api.app.services.catalog_service import next_sort_order


COLLECTION = "projects"

logger = logging.getLogger(__name__)


def _display_key(document: Dict[str, Any]):
    recency = document.get("completed_at") or document["created_at"]
    return (document["sort_order"], -recency)


class ProjectService:
    """Service class for managing portfolio projects."""

    @classmethod
    async def get_public_projects(
        cls,
        category: Optional[str] = None,
        featured_only: bool = False,
        limit: Optional[int] = None,
    ) -> List[ProjectRead]:
        """Return public projects, optionally narrowed by category and/or featured flag."""
        filters: Dict[str, Any] = {"is_public": True}
        if category:
            filters["category"] = category
        if featured_only:
            filters["featured"] = True
        documents = sorted(get_documents(COLLECTION, filters), key=_display_key)
        if limit is not None:
            documents = documents[:limit]
        return [ProjectRead.model_validate(d) for d in documents]

    @classmethod
    async def get_featured_projects(cls, limit: Optional[int] = None) -> List[ProjectRead]:
        documents = get_documents(COLLECTION, {"featured": True, "is_public": True})
        documents.sort(key=lambda d: d["sort_order"])
        if limit is not None:
            documents = documents[:limit]
        return [ProjectRead.model_validate(d) for d in documents]

    @classmethod
    async def get_all_projects(cls) -> List[ProjectRead]:
        """Return every project, newest first (admin view)."""
        documents = get_documents(COLLECTION)
        documents.sort(key=lambda d: d["created_at"], reverse=True)
        return [ProjectRead.model_validate(d) for d in documents]

    @classmethod
    async def get_project(cls, project_id: str) -> Optional[ProjectRead]:
        document = get_document(COLLECTION, project_id)
        return ProjectRead.model_validate(document) if document else None

    @classmethod
    async def create_project(cls, data: ProjectCreate) -> ProjectRead:
        now = now_ms()
        sort_order = data.sort_order
        if sort_order is None:
            sort_order = next_sort_order(get_documents(COLLECTION))
        document = data.model_dump(exclude={"sort_order"})
        document.update(
            {
                "technologies": list(data.technologies),
                "status": data.status or "completed",
                "featured": bool(data.featured),
                "is_public": True if data.is_public is None else data.is_public,
                "sort_order": sort_order,
                "created_at": now,
                "updated_at": now,
            }
        )
        project_id = create_document(COLLECTION, document)
        logger.info("Created project %s", project_id)
        return ProjectRead.model_validate({**document, "id": project_id})

    @classmethod
    async def update_project(cls, project_id: str, data: ProjectUpdate) -> Optional[ProjectRead]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_at"] = now_ms()
        document = update_document(COLLECTION, project_id, changes)
        if document is None:
            return None
        logger.info("Updated project %s", project_id)
        return ProjectRead.model_validate(document)

    @classmethod
    async def delete_project(cls, project_id: str) -> bool:
        deleted = delete_document(COLLECTION, project_id)
        if deleted:
            logger.info("Deleted project %s", project_id)
        return deleted

    @classmethod
    async def _toggle(cls, project_id: str, field: str) -> Optional[ProjectRead]:
        current = get_document(COLLECTION, project_id)
        if current is None:
            return None
        document = update_document(
            COLLECTION, project_id, {field: not current[field], "updated_at": now_ms()}
        )
        return ProjectRead.model_validate(document)

    @classmethod
    async def toggle_project_featured(cls, project_id: str) -> Optional[ProjectRead]:
        return await cls._toggle(project_id, "featured")

    @classmethod
    async def toggle_project_public(cls, project_id: str) -> Optional[ProjectRead]:
        return await cls._toggle(project_id, "is_public")

    @classmethod
    async def get_projects_by_technology(
        cls, technology: str, limit: Optional[int] = None
    ) -> List[ProjectRead]:
        """Return public projects whose technology list contains ``technology`` exactly."""
        documents = get_documents(
            COLLECTION,
            {"is_public": True},
            predicate=lambda d: technology in d.get("technologies", []),
        )
        documents.sort(key=lambda d: d["sort_order"])
        if limit is not None:
            documents = documents[:limit]
        return [ProjectRead.model_validate(d) for d in documents]

    @classmethod
    async def get_project_categories(cls) -> List[Dict[str, Any]]:
        """Count public projects per category, in order of first appearance."""
        counts = Counter(d["category"] for d in get_documents(COLLECTION, {"is_public": True}))
        return [{"category": category, "count": count} for category, count in counts.items()]
