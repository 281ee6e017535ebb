"""
OAuth routes: sign in with Google.

GET /auth/google          : redirect to Google's consent screen
GET /auth/google/callback : resolve the Google profile to a local user
"""
import logging

from authlib.integrations.base_client import OAuthError
from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    request,
    session,
    url_for,
)
from flask_login import login_user

from routes.auth import LOGIN_SUCCESS_MSG, safe_next
from services.auth_service import authenticate
from services.google_oauth import begin_google_login, fetch_google_profile

logger = logging.getLogger(__name__)

oauth_bp = Blueprint("oauth", __name__)

GOOGLE_FAILED_MSG = "Não foi possível entrar com o Google."


@oauth_bp.route("/google", methods=["GET"])
def google_login():
    """Start the Google authorization code flow."""
    return_to = safe_next(request.args.get("next"))
    if return_to:
        session["return_to"] = return_to
    return begin_google_login(url_for("oauth.google_callback", _external=True))


@oauth_bp.route("/google/callback", methods=["GET"])
def google_callback():
    """Finish the Google flow and log the resolved user in."""
    failure_url = current_app.config["LOGIN_FAILURE_REDIRECT"]

    try:
        token, profile = fetch_google_profile()
    except OAuthError as exc:
        logger.error("[ERR] Google authorization failed: %s", exc)
        flash({"msg": GOOGLE_FAILED_MSG}, "error")
        return redirect(failure_url)

    user, info = authenticate(
        "google",
        access_token=token.get("access_token"),
        refresh_token=token.get("refresh_token"),
        profile=profile,
    )
    if not user:
        flash(info or {"msg": GOOGLE_FAILED_MSG}, "error")
        return redirect(failure_url)

    if not login_user(user):
        logger.warning("[ERR] Session not established for Google user: %s", user.email)

    logger.info("[OK] User logged in with Google: %s", user.email)
    flash({"msg": LOGIN_SUCCESS_MSG}, "success")
    return redirect(
        session.pop("return_to", None)
        or current_app.config["LOGIN_SUCCESS_REDIRECT"]
    )
