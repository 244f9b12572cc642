"""
Application package for the agency marketing site backend.

Each content domain (services, projects, testimonials, contacts,
analytics) has a schema module, a service class and a router.  The
routers are grouped by API version under ``api/<version>/``.
"""

from .main import app  # noqa: F401
