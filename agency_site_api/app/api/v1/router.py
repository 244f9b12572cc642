"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (services, projects,
contacts, ...) under a unified prefix.  When a new domain is added,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    analytics,
    contacts,
    projects,
    seed,
    services,
    site,
    testimonials,
)

router = APIRouter()

router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
router.include_router(site.router, prefix="/site", tags=["site"])
router.include_router(seed.router, prefix="/seed", tags=["seed"])
