"""
API route handlers.
"""

from cinecritic.api.routers import movies

__all__ = ["movies"]
