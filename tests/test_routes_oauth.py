"""
Tests for routes/oauth.py and services/google_oauth.py.

Authlib's network calls are never made: the route tests patch
begin_google_login / fetch_google_profile where routes.oauth imports them.
"""
from unittest.mock import patch

from authlib.integrations.base_client import OAuthError
from flask import redirect

from models.user import User
from routes.oauth import GOOGLE_FAILED_MSG
from services.auth_service import EMAIL_TAKEN_MSG
from services.google_oauth import oauth, profile_from_userinfo


GOOGLE_TOKEN = {"access_token": "mock-access", "refresh_token": "mock-refresh"}
GOOGLE_PROFILE = {
    "id": "google123",
    "display_name": "Novo Usuário",
    "email": "novo.usuario@example.com",
}


class TestGoogleLogin:
    """Tests for GET /auth/google."""

    def test_redirects_to_google(self, client, db_session):
        """The callback URL handed to Authlib points back at this app."""
        with patch(
            "routes.oauth.begin_google_login",
            return_value=redirect("https://accounts.google.com/o/oauth2/auth"),
        ) as begin:
            resp = client.get("/auth/google")

        begin.assert_called_once_with("http://localhost/auth/google/callback")
        assert resp.status_code == 302
        assert resp.headers["Location"].startswith("https://accounts.google.com/")

    def test_remembers_safe_next(self, client, db_session):
        with patch("routes.oauth.begin_google_login", return_value=redirect("/x")):
            client.get("/auth/google?next=/account")
        with client.session_transaction() as sess:
            assert sess["return_to"] == "/account"

    def test_control_characters_in_next_not_remembered(self, client, db_session):
        with patch("routes.oauth.begin_google_login", return_value=redirect("/x")):
            client.get("/auth/google", query_string={"next": "/\t/evil.example.com/"})
        with client.session_transaction() as sess:
            assert "return_to" not in sess


class TestGoogleCallback:
    """Tests for GET /auth/google/callback."""

    def test_new_user_is_created_and_logged_in(self, client, db_session, flashes):
        with patch(
            "routes.oauth.fetch_google_profile",
            return_value=(GOOGLE_TOKEN, GOOGLE_PROFILE),
        ):
            resp = client.get("/auth/google/callback")

        assert resp.headers["Location"] == "/"
        user = User.find_one(google_id="google123")
        assert user is not None
        assert user.email == "novo.usuario@example.com"
        with client.session_transaction() as sess:
            assert sess["_user_id"] == str(user.id)
        assert flashes()[0][0] == "success"

    def test_existing_user_is_logged_in(self, client, make_user):
        existing = make_user(email="existente@example.com", google_id="google123")
        with patch(
            "routes.oauth.fetch_google_profile",
            return_value=(GOOGLE_TOKEN, GOOGLE_PROFILE),
        ):
            resp = client.get("/auth/google/callback")

        assert resp.headers["Location"] == "/"
        assert User.query.count() == 1
        with client.session_transaction() as sess:
            assert sess["_user_id"] == str(existing.id)

    def test_return_to_is_used(self, client, db_session):
        with client.session_transaction() as sess:
            sess["return_to"] = "/account"
        with patch(
            "routes.oauth.fetch_google_profile",
            return_value=(GOOGLE_TOKEN, GOOGLE_PROFILE),
        ):
            resp = client.get("/auth/google/callback")
        assert resp.headers["Location"] == "/account"

    def test_provider_error_flashes_and_redirects(self, client, db_session, flashes):
        """A denied consent screen sends the user back to /login."""
        with patch(
            "routes.oauth.fetch_google_profile",
            side_effect=OAuthError(error="access_denied"),
        ):
            resp = client.get("/auth/google/callback")

        assert resp.headers["Location"] == "/login"
        assert flashes() == [("error", {"msg": GOOGLE_FAILED_MSG})]

    def test_strategy_rejection_flashes_info(self, client, make_user, flashes):
        make_user(email="novo.usuario@example.com")
        with patch(
            "routes.oauth.fetch_google_profile",
            return_value=(GOOGLE_TOKEN, GOOGLE_PROFILE),
        ):
            resp = client.get("/auth/google/callback")

        assert resp.headers["Location"] == "/login"
        assert flashes() == [("error", {"msg": EMAIL_TAKEN_MSG})]


class TestGoogleOAuthService:
    """Tests for services/google_oauth.py."""

    def test_google_client_registered(self, app):
        """create_app registers the google client with the configured id."""
        with app.app_context():
            assert oauth.google.client_id == "mock-client-id"

    def test_profile_from_userinfo(self):
        profile = profile_from_userinfo({
            "sub": "google123",
            "name": "Novo Usuário",
            "email": "Novo.Usuario@Example.com",
        })
        assert profile == {
            "id": "google123",
            "display_name": "Novo Usuário",
            "email": "novo.usuario@example.com",
        }

    def test_profile_without_optional_claims(self):
        assert profile_from_userinfo({"sub": "x"}) == {
            "id": "x", "display_name": "", "email": None,
        }
