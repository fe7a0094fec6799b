"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, status
from pymongo.collection import Collection

from cinecritic.api.dependencies import get_movie_collection
from cinecritic.api.models.movie import Message, MovieCreated, MovieIn, MovieResponse
from cinecritic.database import crud

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.post("", response_model=MovieCreated, status_code=status.HTTP_201_CREATED)
def create_movie(movie_in: MovieIn, collection: Collection = Depends(get_movie_collection)):
    """Add a new movie."""
    movie_id = crud.create_movie(collection, movie_in)
    return MovieCreated(message="Movie added successfully", id=movie_id)


@router.get("", response_model=list[MovieResponse])
def list_movies(collection: Collection = Depends(get_movie_collection)):
    """List all movies."""
    return [MovieResponse.from_document(m) for m in crud.get_movies(collection)]


# Literal paths must be registered before /{movie_id}
@router.get("/top-rated", response_model=list[MovieResponse])
def list_top_rated(collection: Collection = Depends(get_movie_collection)):
    """List movies rated 8.5 or higher."""
    return [MovieResponse.from_document(m) for m in crud.get_top_rated_movies(collection)]


@router.get("/category/{category}", response_model=list[MovieResponse])
def list_by_category(category: str, collection: Collection = Depends(get_movie_collection)):
    """List movies in a category (case-insensitive exact match)."""
    movies = crud.get_movies_by_category(collection, category)
    return [MovieResponse.from_document(m) for m in movies]


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, collection: Collection = Depends(get_movie_collection)):
    """Get movie details by ID."""
    return MovieResponse.from_document(crud.get_movie(collection, movie_id))


@router.put("/{movie_id}", response_model=Message)
def update_movie(
    movie_id: str,
    movie_in: MovieIn,
    collection: Collection = Depends(get_movie_collection),
):
    """Replace all fields of a movie."""
    crud.update_movie(collection, movie_id, movie_in)
    return Message(message="Movie updated successfully")


@router.delete("/{movie_id}", response_model=Message)
def delete_movie(movie_id: str, collection: Collection = Depends(get_movie_collection)):
    """Delete a movie."""
    crud.delete_movie(collection, movie_id)
    return Message(message="Movie deleted successfully")
