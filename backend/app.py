"""
Flask application factory.

Creates and configures the Flask app with:
  - SQLAlchemy database connection
  - Flask-Login session handling
  - Google OAuth client (Authlib)
  - Route registration
  - Health check endpoint
  - Structured logging with [OK]/[ERR] markers (no Unicode)
"""
import logging
import sys

from flask import Flask, jsonify

from config import Config
from models import db
from routes import register_routes
from services.auth_service import login_manager
from services.google_oauth import init_oauth


def create_app(config_class=Config):
    """
    Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config).
                      Pass TestConfig for testing with SQLite in-memory.

    Returns:
        Configured Flask app instance.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Set up logging: [OK]/[ERR] markers, no Unicode symbols
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    app.logger.handlers = [handler]
    app.logger.setLevel(logging.INFO)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    init_oauth(app)

    register_routes(app)

    # Health check endpoint: confirms the site is up
    @app.route("/api/health")
    def health():
        """Return service health status."""
        app.logger.info("[OK] Health check passed")
        return jsonify({"status": "ok", "service": "hackstart-web"})

    with app.app_context():
        db.create_all()

    app.logger.info("[OK] hackstart initialized")
    return app
