"""
Flask configuration classes.

Config reads from environment variables with sensible defaults.
TestConfig overrides for pytest with SQLite in-memory.

The postgres:// → postgresql:// fix handles hosted connection strings
that still use the older 'postgres://' prefix, which SQLAlchemy 1.4+
no longer accepts.
"""
import os


class Config:
    """Base configuration for Flask app."""

    # Flask core: also signs the session cookie that carries flash messages
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-me"

    # Database
    _raw_db_url = os.environ.get("DATABASE_URL") or "sqlite:///hackstart_dev.db"
    SQLALCHEMY_DATABASE_URI = _raw_db_url.replace(
        "postgres://", "postgresql://", 1
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,  # Verify connections before use
        "pool_recycle": 300,    # Recycle connections every 5 minutes
    }

    # Google OAuth: Authlib reads GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET
    GOOGLE_CLIENT_ID = os.environ.get("GOOGLE_CLIENT_ID") or ""
    GOOGLE_CLIENT_SECRET = os.environ.get("GOOGLE_CLIENT_SECRET") or ""
    GOOGLE_DISCOVERY_URL = (
        os.environ.get("GOOGLE_DISCOVERY_URL")
        or "https://accounts.google.com/.well-known/openid-configuration"
    )
    GOOGLE_SCOPE = os.environ.get("GOOGLE_SCOPE") or "openid email profile"

    # Where the login controller sends the browser
    LOGIN_SUCCESS_REDIRECT = "/"
    LOGIN_FAILURE_REDIRECT = "/login"


class TestConfig(Config):
    """Test configuration: SQLite in-memory, no external dependencies."""

    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}  # No pool settings needed for SQLite
    GOOGLE_CLIENT_ID = "mock-client-id"
    GOOGLE_CLIENT_SECRET = "mock-client-secret"
