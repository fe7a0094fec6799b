"""
FastAPI dependency injection for the movies collection.
"""

from fastapi import Request
from pymongo.collection import Collection


def get_movie_collection(request: Request) -> Collection:
    """Return the collection attached to the app at startup, for FastAPI Depends()."""
    return request.app.state.movie_collection
