"""
Response schema for the cross-collection search.
"""

from typing import List

from pydantic import Field

from .base import CamelModel
from .contact import ContactRead
from .project import ProjectRead
from .service import ServiceRead
from .testimonial import TestimonialRead


class SearchResults(CamelModel):
    services: List[ServiceRead] = Field(default_factory=list)
    projects: List[ProjectRead] = Field(default_factory=list)
    testimonials: List[TestimonialRead] = Field(default_factory=list)
    contacts: List[ContactRead] = Field(default_factory=list)
