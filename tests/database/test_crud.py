"""
Unit tests for movie CRUD operations.

Uses an in-memory mongomock collection for fast, isolated testing. mongomock ignores
index collations, so the title index options are checked against a mock
collection and enforced end to end by the integration tests.
"""

from unittest.mock import MagicMock

import mongomock
import pytest
from bson import ObjectId

from cinecritic.api.models.movie import MovieIn
from cinecritic.database import crud
from cinecritic.database.errors import ErrorKind, MovieStoreError
from cinecritic.database.init_db import (
    TITLE_COLLATION,
    TITLE_INDEX_NAME,
    init_database,
    verify_indexes,
)


@pytest.fixture
def collection():
    """Create an in-memory movies collection with indexes."""
    client = mongomock.MongoClient()
    collection = client["cineCriticTest"]["movies"]
    init_database(collection)
    yield collection
    client.close()


def make_movie(**overrides) -> MovieIn:
    data = {
        "title": "Inception",
        "category": "Sci-Fi",
        "releaseYear": 2010,
        "rating": 8.8,
        "isFeatured": True,
    }
    data.update(overrides)
    return MovieIn(**data)


class TestCreateAndRead:
    """Tests for create_movie and the read operations."""

    def test_create_movie(self, collection):
        """Creating a movie returns a valid id and stores camelCase fields."""
        movie_id = crud.create_movie(collection, make_movie())

        assert ObjectId.is_valid(movie_id)
        doc = collection.find_one({"_id": ObjectId(movie_id)})
        assert doc["title"] == "Inception"
        assert doc["category"] == "Sci-Fi"
        assert doc["releaseYear"] == 2010
        assert doc["rating"] == 8.8
        assert doc["isFeatured"] is True

    def test_create_movie_defaults_not_featured(self, collection):
        movie_id = crud.create_movie(collection, make_movie(isFeatured=None))
        assert crud.get_movie(collection, movie_id)["isFeatured"] is False

    def test_create_duplicate_title(self, collection):
        """The unique title index rejects a second movie with the same title."""
        crud.create_movie(collection, make_movie())

        with pytest.raises(MovieStoreError) as exc_info:
            crud.create_movie(collection, make_movie(category="Drama"))
        assert exc_info.value.kind is ErrorKind.DUPLICATE_TITLE
        assert crud.get_movie_count(collection) == 1

    def test_get_movie_round_trip(self, collection):
        movie_id = crud.create_movie(collection, make_movie(rating=0, releaseYear=1900))

        movie = crud.get_movie(collection, movie_id)
        assert movie["_id"] == ObjectId(movie_id)
        assert movie["rating"] == 0
        assert movie["releaseYear"] == 1900

    def test_get_movie_not_found(self, collection):
        with pytest.raises(MovieStoreError) as exc_info:
            crud.get_movie(collection, str(ObjectId()))
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    @pytest.mark.parametrize("bad_id", ["not-an-id", "", "123", "zzzzzzzzzzzzzzzzzzzzzzzz"])
    def test_get_movie_invalid_id(self, collection, bad_id):
        with pytest.raises(MovieStoreError) as exc_info:
            crud.get_movie(collection, bad_id)
        assert exc_info.value.kind is ErrorKind.INVALID_ID

    def test_get_movies(self, collection):
        for i in range(3):
            crud.create_movie(collection, make_movie(title=f"Movie {i}"))

        movies = crud.get_movies(collection)
        assert sorted(m["title"] for m in movies) == ["Movie 0", "Movie 1", "Movie 2"]

    def test_get_movies_empty(self, collection):
        assert crud.get_movies(collection) == []
        assert crud.get_movie_count(collection) == 0

    def test_get_top_rated_movies(self, collection):
        """Only movies rated 8.5 or higher are returned."""
        for i, rating in enumerate([6.0, 8.5, 9.2, 8.4]):
            crud.create_movie(collection, make_movie(title=f"Movie {i}", rating=rating))

        top = crud.get_top_rated_movies(collection)
        assert sorted(m["rating"] for m in top) == [8.5, 9.2]

    def test_get_movies_by_category(self, collection):
        """Category match ignores case but must cover the whole value."""
        crud.create_movie(collection, make_movie(title="A", category="drama"))
        crud.create_movie(collection, make_movie(title="B", category="Dramatic"))
        crud.create_movie(collection, make_movie(title="C", category="DRAMA"))

        movies = crud.get_movies_by_category(collection, "Drama")
        assert sorted(m["title"] for m in movies) == ["A", "C"]

    def test_get_movies_by_category_is_literal(self, collection):
        """Regex metacharacters in the category are matched literally."""
        crud.create_movie(collection, make_movie(title="A", category="Drama"))
        crud.create_movie(collection, make_movie(title="B", category="Sci.Fi"))

        assert crud.get_movies_by_category(collection, ".*") == []
        assert [m["title"] for m in crud.get_movies_by_category(collection, "sci.fi")] == ["B"]


class TestUpdate:
    """Tests for update_movie."""

    def test_update_movie(self, collection):
        movie_id = crud.create_movie(collection, make_movie())

        crud.update_movie(
            collection,
            movie_id,
            make_movie(title="Interstellar", category="Drama", releaseYear=2014,
                       rating=8.6, isFeatured=False),
        )

        movie = crud.get_movie(collection, movie_id)
        assert movie["title"] == "Interstellar"
        assert movie["category"] == "Drama"
        assert movie["releaseYear"] == 2014
        assert movie["rating"] == 8.6
        assert movie["isFeatured"] is False

    def test_update_movie_not_found(self, collection):
        with pytest.raises(MovieStoreError) as exc_info:
            crud.update_movie(collection, str(ObjectId()), make_movie())
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert crud.get_movie_count(collection) == 0

    def test_update_movie_invalid_id(self, collection):
        with pytest.raises(MovieStoreError) as exc_info:
            crud.update_movie(collection, "not-an-id", make_movie())
        assert exc_info.value.kind is ErrorKind.INVALID_ID


class TestDelete:
    """Tests for delete_movie."""

    def test_delete_movie(self, collection):
        movie_id = crud.create_movie(collection, make_movie())

        crud.delete_movie(collection, movie_id)

        with pytest.raises(MovieStoreError) as exc_info:
            crud.get_movie(collection, movie_id)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_delete_movie_twice(self, collection):
        movie_id = crud.create_movie(collection, make_movie())
        crud.delete_movie(collection, movie_id)

        with pytest.raises(MovieStoreError) as exc_info:
            crud.delete_movie(collection, movie_id)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_delete_movie_invalid_id(self, collection):
        with pytest.raises(MovieStoreError) as exc_info:
            crud.delete_movie(collection, "not-an-id")
        assert exc_info.value.kind is ErrorKind.INVALID_ID


class TestInitDatabase:
    """Tests for index initialization."""

    def test_init_database_is_idempotent(self, collection):
        assert init_database(collection) == "title_unique_ci"
        assert verify_indexes(collection) is True

    def test_title_index_is_unique_and_case_insensitive(self):
        """The title index uses an English collation at strength 2 (case ignored)."""
        collection = MagicMock()
        collection.create_index.return_value = TITLE_INDEX_NAME

        assert init_database(collection) == TITLE_INDEX_NAME

        collection.create_index.assert_called_once_with(
            [("title", 1)],
            name=TITLE_INDEX_NAME,
            unique=True,
            collation=TITLE_COLLATION,
        )
        assert TITLE_COLLATION == {"locale": "en", "strength": 2}

    def test_verify_indexes_missing(self):
        collection = mongomock.MongoClient()["cineCriticTest"]["movies"]
        collection.insert_one({"title": "Inception"})
        assert verify_indexes(collection) is False
