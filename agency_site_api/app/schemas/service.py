"""
Pydantic schemas for the services catalogue.

A service is one of the agency's offerings shown on the landing page
(e.g. "AI & Machine Learning").  ``sort_order`` controls the display
order; inactive services are hidden from public listings.
"""

from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel


ServiceCategory = Literal["development", "design", "consulting", "ai-ml", "cloud", "security"]


class ServiceCreate(CamelModel):
    """Schema for creating a new service."""

    title: str = Field(..., min_length=1, description="Display title")
    description: str = Field(..., description="Marketing description")
    icon: str = Field(..., description="Icon name or URL")
    category: ServiceCategory
    features: List[str] = Field(default_factory=list, description="Bullet-point features")
    is_active: Optional[bool] = Field(None, description="Defaults to true")
    sort_order: Optional[int] = Field(None, description="Defaults to one past the current maximum")


class ServiceUpdate(CamelModel):
    """Schema for updating a service; only provided fields change."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[ServiceCategory] = None
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class ServiceReorder(CamelModel):
    """New display order, expressed as the full list of service ids."""

    service_ids: List[str]


class ServiceRead(CamelModel):
    """Schema for reading a service."""

    id: str
    title: str
    description: str
    icon: str
    category: ServiceCategory
    features: List[str]
    is_active: bool
    sort_order: int
    created_at: int
    updated_at: int
