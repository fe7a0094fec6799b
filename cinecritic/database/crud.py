"""
CRUD operations for movie documents.

Each function takes the movies collection as its first argument and maps one
request intent to one collection call. Failures the caller must distinguish
are raised as MovieStoreError; any other store error propagates unchanged.
"""

import re
from typing import Any, Dict, List

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from cinecritic.api.models.movie import MovieIn
from cinecritic.database.errors import ErrorKind, MovieStoreError

TOP_RATED_THRESHOLD = 8.5


def _object_id(movie_id: str) -> ObjectId:
    """Parse a client-supplied id, raising INVALID_ID if it is malformed."""
    if not ObjectId.is_valid(movie_id):
        raise MovieStoreError(ErrorKind.INVALID_ID, f"Malformed movie id: {movie_id!r}")
    return ObjectId(movie_id)


def _to_document(movie: MovieIn) -> Dict[str, Any]:
    return {
        "title": movie.title,
        "category": movie.category,
        "releaseYear": movie.release_year,
        "rating": movie.rating,
        "isFeatured": movie.is_featured,
    }


# ==================== CREATE ====================

def create_movie(collection: Collection, movie: MovieIn) -> str:
    """
    Insert a new movie.

    Args:
        collection: Movies collection
        movie: Validated movie payload

    Returns:
        Generated id as a hex string

    Raises:
        MovieStoreError: DUPLICATE_TITLE if the title already exists (any case)
    """
    try:
        result = collection.insert_one(_to_document(movie))
    except DuplicateKeyError as exc:
        raise MovieStoreError(ErrorKind.DUPLICATE_TITLE, str(exc)) from exc
    return str(result.inserted_id)


# ==================== READ ====================

def get_movies(collection: Collection) -> List[Dict[str, Any]]:
    """Get every movie, in storage order."""
    return list(collection.find())


def get_top_rated_movies(
    collection: Collection,
    min_rating: float = TOP_RATED_THRESHOLD,
) -> List[Dict[str, Any]]:
    """
    Get movies rated at or above a threshold.

    Args:
        collection: Movies collection
        min_rating: Inclusive lower bound on rating

    Returns:
        List of movie documents
    """
    return list(collection.find({"rating": {"$gte": min_rating}}))


def get_movies_by_category(collection: Collection, category: str) -> List[Dict[str, Any]]:
    """
    Get movies whose category equals ``category``, ignoring case.

    The whole value must match; "Drama" does not match "Dramatic".
    """
    pattern = f"^{re.escape(category)}$"
    return list(collection.find({"category": {"$regex": pattern, "$options": "i"}}))


def get_movie(collection: Collection, movie_id: str) -> Dict[str, Any]:
    """
    Get a movie by id.

    Raises:
        MovieStoreError: INVALID_ID for a malformed id, NOT_FOUND if no match
    """
    movie = collection.find_one({"_id": _object_id(movie_id)})
    if movie is None:
        raise MovieStoreError(ErrorKind.NOT_FOUND, f"No movie with id {movie_id}")
    return movie


def get_movie_count(collection: Collection) -> int:
    """Get total count of movies."""
    return collection.count_documents({})


# ==================== UPDATE ====================

def update_movie(collection: Collection, movie_id: str, movie: MovieIn) -> None:
    """
    Replace all mutable fields of a movie in a single update.

    Args:
        collection: Movies collection
        movie_id: Id of the movie to update
        movie: Validated movie payload

    Raises:
        MovieStoreError: INVALID_ID, NOT_FOUND, or DUPLICATE_TITLE
    """
    oid = _object_id(movie_id)
    try:
        result = collection.update_one({"_id": oid}, {"$set": _to_document(movie)})
    except DuplicateKeyError as exc:
        raise MovieStoreError(ErrorKind.DUPLICATE_TITLE, str(exc)) from exc
    if result.matched_count == 0:
        raise MovieStoreError(ErrorKind.NOT_FOUND, f"No movie with id {movie_id}")


# ==================== DELETE ====================

def delete_movie(collection: Collection, movie_id: str) -> None:
    """
    Delete a movie by id.

    Raises:
        MovieStoreError: INVALID_ID for a malformed id, NOT_FOUND if nothing was deleted
    """
    result = collection.delete_one({"_id": _object_id(movie_id)})
    if result.deleted_count == 0:
        raise MovieStoreError(ErrorKind.NOT_FOUND, f"No movie with id {movie_id}")
