"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with a local SQLite file and no admin tokens, which means
admin-only routes stay closed until ``ADMIN_TOKENS`` is set.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Agency Site API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Comma-separated list of bearer tokens that carry the admin
    # capability.  Requests presenting one of these tokens may manage
    # content, read contact submissions and include contacts in search.
    admin_tokens: str = os.getenv("ADMIN_TOKENS", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "agency_site.db")

    # When set, analytics seeding draws from ``random.Random(seed)`` so
    # repeated runs produce identical volumes.
    seed_random_seed: Optional[int] = _optional_int("SEED_RANDOM_SEED")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
