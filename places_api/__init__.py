"""
Top-level package for the Places API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
