"""
Shared fixtures: an in-memory SQLite database per test, services bound to
it, and a TestClient whose get_db dependency points at the same database.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from movie_catalog.api.dependencies import get_db
from movie_catalog.api.main import app
from movie_catalog.core.catalog import MovieService, ReviewService
from movie_catalog.core.watch_history import WatchHistoryService
from movie_catalog.database.connection import DatabaseManager

TODAY = date(2026, 3, 14)


@pytest.fixture
def db_manager():
    """Create an in-memory database with all tables."""
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def session(db_manager):
    """Create a new database session for testing."""
    session = db_manager.get_session()
    yield session
    session.close()


@pytest.fixture
def movie_service(session):
    return MovieService(session)


@pytest.fixture
def review_service(session, movie_service):
    return ReviewService(session, movie_service)


@pytest.fixture
def today():
    """Fixed date used as the service clock."""
    return TODAY


@pytest.fixture
def history(session, movie_service, today):
    """Watch history service with a fixed clock."""
    return WatchHistoryService(session, movie_service, today=lambda: today)


@pytest.fixture
def client(db_manager):
    """TestClient backed by the test database."""
    def override_get_db():
        with db_manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
