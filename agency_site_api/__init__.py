"""
Top-level package for the Agency Site API.

The package marker lets modules under ``app`` be imported with fully
qualified names such as ``agency_site_api.app.main``, which is what the
test suite and ``run.py`` rely on.

All functionality lives in submodules under ``app``.
"""

__all__ = []
