"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Every field except ``database_url`` has a
default; a missing connection string is reported when the application
starts, not at import time, so that the module can be imported by tests
and tooling without a configured database.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Places API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Connection string for the SQLite database.  Either a filesystem
    # path or a ``sqlite:///`` URL.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = field(default_factory=lambda: _env("DATABASE_URL"))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Code that needs a fresh
# view of the environment (tests, ``run.py``) can build ``Settings()``
# itself.
settings = Settings()
