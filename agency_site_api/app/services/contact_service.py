"""
Service layer for contact form submissions.

``submit_contact`` is the only public operation: it stores a validated
submission with status ``new`` and a priority derived from the
requester's budget and timeline.  Everything else is the admin inbox
(listing, statistics, status/priority changes, notes).

Status changes are not constrained to a workflow: any status may
follow any other.  Moving a contact to any status other than ``new``
stamps ``responded_at``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from agency_site_api.app.core.db import (
    DAY_MS,
    create_document,
    delete_document,
    get_document,
    get_documents,
    now_ms,
    update_document,
)
from agency_site_api.app.schemas.contact import ContactCreate, ContactRead


COLLECTION = "contacts"

PRIORITY_RANK = {"urgent": 4, "high": 3, "medium": 2, "low": 1}

logger = logging.getLogger(__name__)


def derive_priority(budget_range: Optional[str], timeline: Optional[str]) -> str:
    """Priority for a new submission based on its budget and timeline."""
    if budget_range == "50k-plus" and timeline == "asap":
        return "urgent"
    if budget_range == "50k-plus" or timeline == "asap":
        return "high"
    if budget_range == "under-5k":
        return "low"
    return "medium"


class ContactService:
    """Service class for contact submissions."""

    @classmethod
    async def submit_contact(cls, data: ContactCreate) -> str:
        """Store a contact submission and return its id."""
        now = now_ms()
        document = data.model_dump()
        document.update(
            {
                "status": "new",
                "priority": derive_priority(data.budget_range, data.timeline),
                "is_read": False,
                "created_at": now,
                "updated_at": now,
            }
        )
        contact_id = create_document(COLLECTION, document)
        logger.info("Contact %s submitted with priority %s", contact_id, document["priority"])
        return contact_id

    @classmethod
    async def get_all_contacts(
        cls,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        unread_only: bool = False,
    ) -> List[ContactRead]:
        """Return contacts matching all given filters.

        Sorted by priority (urgent first), then newest first.
        """
        filters: Dict[str, Any] = {}
        if status:
            filters["status"] = status
        if priority:
            filters["priority"] = priority
        if unread_only:
            filters["is_read"] = False
        documents = get_documents(COLLECTION, filters)
        documents.sort(key=lambda d: (-PRIORITY_RANK.get(d["priority"], 0), -d["created_at"]))
        return [ContactRead.model_validate(d) for d in documents]

    @classmethod
    async def get_contact(cls, contact_id: str) -> Optional[ContactRead]:
        document = get_document(COLLECTION, contact_id)
        return ContactRead.model_validate(document) if document else None

    @classmethod
    async def get_contacts_by_email(cls, email: str) -> List[ContactRead]:
        return [ContactRead.model_validate(d) for d in get_documents(COLLECTION, {"email": email})]

    @classmethod
    async def get_recent_contacts(cls, limit: int = 10, days: int = 7) -> List[ContactRead]:
        cutoff = now_ms() - days * DAY_MS
        documents = get_documents(COLLECTION, predicate=lambda d: d["created_at"] >= cutoff)
        documents.sort(key=lambda d: d["created_at"], reverse=True)
        return [ContactRead.model_validate(d) for d in documents[:limit]]

    @classmethod
    async def get_contact_stats(cls) -> Dict[str, Any]:
        """Return inbox counters.  ``thisMonth`` uses the current UTC calendar month."""
        documents = get_documents(COLLECTION)
        today = datetime.now(timezone.utc)

        def in_current_month(created_at: int) -> bool:
            created = datetime.fromtimestamp(created_at / 1000, tz=timezone.utc)
            return created.year == today.year and created.month == today.month

        stats: Dict[str, Any] = {"total": len(documents)}
        for status in ("new", "contacted", "qualified", "converted", "closed"):
            stats[status] = sum(1 for d in documents if d["status"] == status)
        stats["unread"] = sum(1 for d in documents if not d["is_read"])
        stats["urgent"] = sum(1 for d in documents if d["priority"] == "urgent")
        stats["high"] = sum(1 for d in documents if d["priority"] == "high")
        stats["thisMonth"] = sum(1 for d in documents if in_current_month(d["created_at"]))
        return stats

    @classmethod
    async def update_contact_status(cls, contact_id: str, status: str) -> Optional[ContactRead]:
        current = get_document(COLLECTION, contact_id)
        if current is None:
            return None
        now = now_ms()
        responded_at = now if status != "new" else current.get("responded_at")
        document = update_document(
            COLLECTION,
            contact_id,
            {"status": status, "responded_at": responded_at, "updated_at": now},
        )
        logger.info("Contact %s moved from %s to %s", contact_id, current["status"], status)
        return ContactRead.model_validate(document)

    @classmethod
    async def update_contact_priority(cls, contact_id: str, priority: str) -> Optional[ContactRead]:
        document = update_document(COLLECTION, contact_id, {"priority": priority, "updated_at": now_ms()})
        return ContactRead.model_validate(document) if document else None

    @classmethod
    async def mark_contact_as_read(cls, contact_id: str, is_read: bool = True) -> Optional[ContactRead]:
        document = update_document(COLLECTION, contact_id, {"is_read": is_read, "updated_at": now_ms()})
        return ContactRead.model_validate(document) if document else None

    @classmethod
    async def add_contact_notes(cls, contact_id: str, notes: str) -> Optional[ContactRead]:
        """Append a timestamped entry to the contact's internal notes."""
        current = get_document(COLLECTION, contact_id)
        if current is None:
            return None
        stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        entry = f"[{stamp}] {notes}"
        existing = current.get("notes") or ""
        combined = f"{existing}\n\n{entry}" if existing else entry
        document = update_document(COLLECTION, contact_id, {"notes": combined, "updated_at": now_ms()})
        return ContactRead.model_validate(document)

    @classmethod
    async def delete_contact(cls, contact_id: str) -> bool:
        deleted = delete_document(COLLECTION, contact_id)
        if deleted:
            logger.info("Deleted contact %s", contact_id)
        return deleted
