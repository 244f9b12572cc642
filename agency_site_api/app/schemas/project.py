"""
Pydantic schemas for portfolio projects.
"""

from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel


ProjectCategory = Literal["web-app", "mobile-app", "ai-ml", "design-system", "api", "automation"]
ProjectStatus = Literal["completed", "in-progress", "archived"]


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    title: str = Field(..., min_length=1)
    description: str
    short_description: str = Field(..., description="Used on cards and previews")
    image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    project_url: Optional[str] = Field(None, description="Live project URL")
    github_url: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    category: ProjectCategory
    status: Optional[ProjectStatus] = None
    featured: Optional[bool] = None
    client_name: Optional[str] = None
    completed_at: Optional[int] = Field(None, description="Completion time in epoch milliseconds")
    sort_order: Optional[int] = None
    is_public: Optional[bool] = None


class ProjectUpdate(CamelModel):
    """Schema for updating a project; only provided fields change."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    technologies: Optional[List[str]] = None
    category: Optional[ProjectCategory] = None
    status: Optional[ProjectStatus] = None
    featured: Optional[bool] = None
    client_name: Optional[str] = None
    completed_at: Optional[int] = None
    sort_order: Optional[int] = None
    is_public: Optional[bool] = None


class ProjectRead(CamelModel):
    """Schema for reading a project."""

    id: str
    title: str
    description: str
    short_description: str
    image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    technologies: List[str]
    category: ProjectCategory
    status: ProjectStatus
    featured: bool
    client_name: Optional[str] = None
    completed_at: Optional[int] = None
    sort_order: int
    is_public: bool
    created_at: int
    updated_at: int
