"""
Pydantic schemas for API request/response validation.
"""

from cinecritic.api.models.movie import MovieIn, MovieResponse, MovieCreated, Message

__all__ = [
    "MovieIn",
    "MovieResponse",
    "MovieCreated",
    "Message",
]
