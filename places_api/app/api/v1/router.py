"""
Top-level router for version 1 of the API.

Aggregates the domain routers under their path prefixes.  ``main``
mounts this router twice: without a prefix and under ``/v1``.
"""

from fastapi import APIRouter

from .endpoints import places

router = APIRouter()

router.include_router(places.router, prefix="/places", tags=["places"])
