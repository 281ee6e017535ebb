"""
Google OAuth client: thin wrapper around Authlib's Flask integration.

Authlib owns the protocol (state, code exchange, ID token validation).
This module only registers the client and turns Google's userinfo into
the profile dict the "google" auth strategy expects:
  {"id": <sub>, "display_name": <name>, "email": <email>}
"""
import logging

from authlib.integrations.flask_client import OAuth
from flask import current_app

logger = logging.getLogger(__name__)

oauth = OAuth()


def init_oauth(app):
    """Bind the OAuth registry to the app and register the google client."""
    oauth.init_app(app)
    oauth.register(
        name="google",
        server_metadata_url=app.config["GOOGLE_DISCOVERY_URL"],
        client_kwargs={"scope": app.config["GOOGLE_SCOPE"]},
    )


def begin_google_login(redirect_uri):
    """Return the redirect response that sends the browser to Google."""
    if not current_app.config.get("GOOGLE_CLIENT_ID"):
        logger.error("[ERR] GOOGLE_CLIENT_ID is not configured")
    return oauth.google.authorize_redirect(redirect_uri)


def fetch_google_profile():
    """
    Complete the authorization code exchange for the current callback.

    Returns:
        (token, profile) tuple.

    Raises:
        authlib.integrations.base_client.OAuthError: if Google reported an
            error or the state/code did not check out.
    """
    token = oauth.google.authorize_access_token()
    userinfo = token.get("userinfo") or oauth.google.userinfo(token=token)
    return token, profile_from_userinfo(userinfo)


def profile_from_userinfo(userinfo):
    """Map OpenID Connect userinfo claims to a strategy profile."""
    return {
        "id": userinfo["sub"],
        "display_name": userinfo.get("name") or "",
        "email": (userinfo.get("email") or "").lower() or None,
    }
