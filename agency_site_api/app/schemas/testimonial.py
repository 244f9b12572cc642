"""
Pydantic schemas for client testimonials.

Testimonials require approval before they appear on the site.  The
optional ``project_id`` points at a project by id; nothing checks that
the project exists.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class TestimonialCreate(CamelModel):
    """Schema for creating a testimonial."""

    client_name: str = Field(..., min_length=1)
    client_title: str
    client_company: str
    client_avatar: Optional[str] = None
    testimonial: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    project_id: Optional[str] = None
    featured: Optional[bool] = None
    approved: Optional[bool] = Field(None, description="Defaults to false; testimonials need approval")
    sort_order: Optional[int] = None


class TestimonialUpdate(CamelModel):
    """Schema for updating a testimonial; only provided fields change."""

    client_name: Optional[str] = Field(None, min_length=1)
    client_title: Optional[str] = None
    client_company: Optional[str] = None
    client_avatar: Optional[str] = None
    testimonial: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    project_id: Optional[str] = None
    featured: Optional[bool] = None
    approved: Optional[bool] = None
    sort_order: Optional[int] = None


class TestimonialRead(CamelModel):
    """Schema for reading a testimonial."""

    id: str
    client_name: str
    client_title: str
    client_company: str
    client_avatar: Optional[str] = None
    testimonial: str
    rating: int
    project_id: Optional[str] = None
    featured: bool
    approved: bool
    sort_order: int
    created_at: int
    updated_at: int
