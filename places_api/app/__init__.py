"""
Application package initializer.

The API is split into ``core`` (settings, logging, database),
``schemas`` (wire models and validation), ``services`` (SQL) and
``api`` (versioned routers).
"""

from .main import app  # noqa: F401
