"""
Unit tests for movie CRUD operations.

Uses an in-memory SQLite database for fast, isolated testing.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from movie_catalog.database.models import Base
from movie_catalog.database import crud


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine, expire_on_commit=False)
    session = Session()
    yield session
    session.close()


def _add(session, name, duration=100, price=10, description=None):
    fields = {"name": name, "duration": duration, "price": price}
    if description is not None:
        fields["description"] = description
    return crud.create_movie(session, fields)


class TestMovieCRUD:
    """Tests for Movie CRUD operations."""

    def test_create_movie(self, session):
        """Test inserting a movie returns the stored row with an id."""
        movie = _add(session, "Heat", duration=170, price=9.99, description="LA crime")

        assert movie.id is not None
        assert movie.name == "Heat"
        assert movie.description == "LA crime"
        assert movie.duration == 170
        assert movie.price == pytest.approx(9.99)

    def test_create_movie_without_description(self, session):
        """Test that description defaults to NULL."""
        movie = _add(session, "Alien")
        assert movie.description is None

    def test_create_movie_rejects_unknown_column(self, session):
        """Test that only movie columns can be written."""
        with pytest.raises(ValueError):
            crud.create_movie(session, {"name": "X", "duration": 1, "price": 1, "rating": 5})

    def test_unique_name_constraint(self, session):
        """Test that the store refuses a second movie with the same name."""
        _add(session, "Heat")
        with pytest.raises(IntegrityError):
            _add(session, "Heat")

    def test_get_movie(self, session):
        """Test retrieving a movie by ID."""
        movie = _add(session, "Heat")

        retrieved = crud.get_movie(session, movie.id)
        assert retrieved is not None
        assert retrieved.id == movie.id
        assert retrieved.name == "Heat"

    def test_get_movie_not_found(self, session):
        """Test that getting a non-existent movie returns None."""
        assert crud.get_movie(session, 999) is None

    def test_get_movie_by_name(self, session):
        """Test exact-name lookup."""
        _add(session, "Heat")

        assert crud.get_movie_by_name(session, "Heat") is not None
        assert crud.get_movie_by_name(session, "heat") is None
        assert crud.get_movie_by_name(session, None) is None

    def test_get_movies_offset_limit(self, session):
        """Test windowing in insertion order."""
        for i in range(7):
            _add(session, f"Movie {i}")

        first = crud.get_movies(session, offset=0, limit=5)
        assert [m.name for m in first] == [f"Movie {i}" for i in range(5)]

        second = crud.get_movies(session, offset=5, limit=5)
        assert [m.name for m in second] == ["Movie 5", "Movie 6"]

    def test_get_movies_sorted(self, session):
        """Test ordering by an allow-listed column in both directions."""
        _add(session, "Mid", price=20)
        _add(session, "Cheap", price=5)
        _add(session, "Pricey", price=50)

        asc = crud.get_movies(session, sort="price", order="ASC")
        assert [m.name for m in asc] == ["Cheap", "Mid", "Pricey"]

        desc = crud.get_movies(session, sort="price", order="DESC")
        assert [m.name for m in desc] == ["Pricey", "Mid", "Cheap"]

    def test_get_movies_ignores_unknown_sort(self, session):
        """Test that a non allow-listed sort falls back to insertion order."""
        _add(session, "B", price=2)
        _add(session, "A", price=1)

        movies = crud.get_movies(session, sort="name")
        assert [m.name for m in movies] == ["B", "A"]

    def test_get_movie_count(self, session):
        """Test total count."""
        assert crud.get_movie_count(session) == 0
        for i in range(3):
            _add(session, f"Movie {i}")
        assert crud.get_movie_count(session) == 3

    def test_update_movie(self, session):
        """Test that only supplied columns change."""
        movie = _add(session, "Heat", duration=170, price=10, description="old")

        updated = crud.update_movie(session, movie.id, {"price": 15})

        assert updated.price == 15
        assert updated.name == "Heat"
        assert updated.duration == 170
        assert updated.description == "old"

    def test_update_movie_empty_fields(self, session):
        """Test that an empty update returns the row unchanged."""
        movie = _add(session, "Heat")

        updated = crud.update_movie(session, movie.id, {})
        assert updated.id == movie.id
        assert updated.name == "Heat"

    def test_update_movie_not_found(self, session):
        """Test updating a non-existent movie."""
        assert crud.update_movie(session, 999, {"price": 1}) is None

    def test_delete_movie(self, session):
        """Test deleting a movie."""
        movie = _add(session, "Heat")

        assert crud.delete_movie(session, movie.id) is True
        assert crud.get_movie(session, movie.id) is None

    def test_delete_movie_not_found(self, session):
        """Test deleting a non-existent movie."""
        assert crud.delete_movie(session, 999) is False
