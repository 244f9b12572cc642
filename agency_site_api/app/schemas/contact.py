"""
Pydantic schemas for contact form submissions.

Submissions are validated here as well as in the browser: the email
must be well formed, name/subject/message must not be blank and the
message is capped at 5000 characters.  Workflow fields (status,
priority, notes) are only changed through the admin endpoints.
"""

from typing import List, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from .base import CamelModel


BudgetRange = Literal["under-5k", "5k-15k", "15k-50k", "50k-plus", "not-specified"]
PreferredContact = Literal["email", "phone", "both"]
Timeline = Literal["asap", "1-month", "3-months", "6-months-plus", "not-specified"]
ContactStatus = Literal["new", "contacted", "qualified", "converted", "closed"]
ContactPriority = Literal["low", "medium", "high", "urgent"]

MAX_MESSAGE_LENGTH = 5000


class ContactCreate(CamelModel):
    """Schema for a contact form submission."""

    name: str = Field(..., max_length=200)
    email: EmailStr
    company: Optional[str] = None
    phone: Optional[str] = None
    subject: str = Field(..., max_length=300)
    message: str
    service_interest: Optional[List[str]] = None
    budget_range: Optional[BudgetRange] = None
    preferred_contact: Optional[PreferredContact] = None
    timeline: Optional[Timeline] = None

    @field_validator("name", "subject", "message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field must not be blank")
        return v

    @field_validator("message")
    @classmethod
    def limit_message(cls, v: str) -> str:
        if len(v) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"Message must be {MAX_MESSAGE_LENGTH} characters or fewer")
        return v


class ContactStatusUpdate(CamelModel):
    status: ContactStatus


class ContactPriorityUpdate(CamelModel):
    priority: ContactPriority


class ContactReadUpdate(CamelModel):
    is_read: bool = True


class ContactNote(CamelModel):
    notes: str = Field(..., min_length=1)


class ContactRead(CamelModel):
    """Schema for reading a contact submission (admin only)."""

    id: str
    name: str
    email: str
    company: Optional[str] = None
    phone: Optional[str] = None
    subject: str
    message: str
    service_interest: Optional[List[str]] = None
    budget_range: Optional[BudgetRange] = None
    preferred_contact: Optional[PreferredContact] = None
    timeline: Optional[Timeline] = None
    status: ContactStatus
    priority: ContactPriority
    notes: Optional[str] = None
    is_read: bool
    responded_at: Optional[int] = None
    created_at: int
    updated_at: int
