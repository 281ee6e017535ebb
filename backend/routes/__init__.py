"""
Route registration for the Flask app.

Registers all route blueprints:
  - main routes (home, account)
  - auth routes (email/password login, logout)
  - oauth routes (Google sign-in)
"""
from routes.auth import auth_bp
from routes.main import main_bp
from routes.oauth import oauth_bp


def register_routes(app):
    """
    Register all route blueprints with the Flask app.

    Args:
        app: Flask application instance.
    """
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(oauth_bp, url_prefix="/auth")
