"""
Shared pytest fixtures for hackstart tests.

Uses TestConfig (SQLite in-memory) so tests run without a real database.
Session-scoped app fixture is built once; db_session creates the tables
before each test and drops them after, so every test starts empty.
"""
import sys
import os

import pytest

# Add backend to Python path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from app import create_app  # noqa: E402
from config import TestConfig  # noqa: E402
from models import db as _db  # noqa: E402
from models.user import User  # noqa: E402


@pytest.fixture(scope="session")
def app():
    """Create Flask app with TestConfig (SQLite in-memory) once per session."""
    app = create_app(config_class=TestConfig)
    yield app


@pytest.fixture(scope="function")
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture(scope="function")
def db_session(app):
    """Per-test database: fresh tables in, everything dropped out."""
    with app.app_context():
        _db.create_all()

        yield _db.session

        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def make_user(db_session):
    """Factory fixture to create a committed User in the test database."""
    def _make_user(email="user@example.com", password="password123",
                   google_id=None, name="Test User", username=None):
        user = User(
            google_id=google_id,
            email=email,
            name=name,
            username=username or (email or "user").split("@")[0],
        )
        if password:
            user.set_password(password)
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user


@pytest.fixture()
def flashes(client):
    """Return a callable reading the (category, message) flashes in the session."""
    def _flashes():
        with client.session_transaction() as sess:
            return list(sess.get("_flashes", []))
    return _flashes
