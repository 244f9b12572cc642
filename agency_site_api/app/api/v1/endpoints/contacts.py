"""
Contact form endpoints for API v1.

Submitting the contact form is public.  Every other route is the admin
inbox and requires the admin capability, since submissions contain
personal data.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agency_site_api.app.core.security import require_admin
from agency_site_api.app.schemas.contact import (
    ContactCreate,
    ContactNote,
    ContactPriority,
    ContactPriorityUpdate,
    ContactRead,
    ContactReadUpdate,
    ContactStatus,
    ContactStatusUpdate,
)
from agency_site_api.app.services.contact_service import ContactService

router = APIRouter()


def _found(contact: Optional[ContactRead]) -> ContactRead:
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.post("/", status_code=status.HTTP_201_CREATED)
async def submit_contact(data: ContactCreate) -> Dict[str, str]:
    """Store a contact form submission and return its id."""
    contact_id = await ContactService.submit_contact(data)
    return {"id": contact_id}


@router.get("/", response_model=List[ContactRead])
async def list_contacts(
    contact_status: Optional[ContactStatus] = Query(None, alias="status"),
    priority: Optional[ContactPriority] = Query(None),
    unread_only: bool = Query(False, alias="unreadOnly"),
    current_user: dict = Depends(require_admin),
) -> List[ContactRead]:
    """List contacts, most urgent first, then newest first (admin only)."""
    return await ContactService.get_all_contacts(status=contact_status, priority=priority, unread_only=unread_only)


@router.get("/stats")
async def contact_stats(current_user: dict = Depends(require_admin)) -> Dict[str, Any]:
    return await ContactService.get_contact_stats()


@router.get("/recent", response_model=List[ContactRead])
async def recent_contacts(
    limit: int = Query(10, ge=1, le=100),
    days: int = Query(7, ge=1, le=365),
    current_user: dict = Depends(require_admin),
) -> List[ContactRead]:
    return await ContactService.get_recent_contacts(limit=limit, days=days)


@router.get("/by-email", response_model=List[ContactRead])
async def contacts_by_email(
    email: str = Query(..., min_length=3),
    current_user: dict = Depends(require_admin),
) -> List[ContactRead]:
    return await ContactService.get_contacts_by_email(email)


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(contact_id: str, current_user: dict = Depends(require_admin)) -> ContactRead:
    return _found(await ContactService.get_contact(contact_id))


@router.put("/{contact_id}/status", response_model=ContactRead)
async def update_contact_status(
    contact_id: str,
    data: ContactStatusUpdate,
    current_user: dict = Depends(require_admin),
) -> ContactRead:
    return _found(await ContactService.update_contact_status(contact_id, data.status))


@router.put("/{contact_id}/priority", response_model=ContactRead)
async def update_contact_priority(
    contact_id: str,
    data: ContactPriorityUpdate,
    current_user: dict = Depends(require_admin),
) -> ContactRead:
    return _found(await ContactService.update_contact_priority(contact_id, data.priority))


@router.put("/{contact_id}/read", response_model=ContactRead)
async def mark_contact_as_read(
    contact_id: str,
    data: ContactReadUpdate,
    current_user: dict = Depends(require_admin),
) -> ContactRead:
    return _found(await ContactService.mark_contact_as_read(contact_id, data.is_read))


@router.post("/{contact_id}/notes", response_model=ContactRead)
async def add_contact_notes(
    contact_id: str,
    data: ContactNote,
    current_user: dict = Depends(require_admin),
) -> ContactRead:
    """Append a timestamped internal note (admin only)."""
    return _found(await ContactService.add_contact_notes(contact_id, data.notes))


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(contact_id: str, current_user: dict = Depends(require_admin)) -> None:
    if not await ContactService.delete_contact(contact_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return None
