"""
Auth routes: local email/password login and logout.

GET  /login  : login page (signed-in users go home)
POST /login  : validate form, authenticate, redirect
GET  /logout : end the session
"""
import logging
from urllib.parse import urlsplit

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
)
from flask_login import current_user, login_user, logout_user

from services.auth_service import INVALID_CREDENTIALS_MSG, authenticate
from services.validation_service import normalize_email, validate_login_form

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)

LOGIN_SUCCESS_MSG = "Sucesso! Você está conectado."


def safe_next(target):
    """
    Return target if it is a same-site relative path, else None.

    Browsers drop tabs and newlines inside URLs, so "/<tab>/evil.com" would
    become "//evil.com". Any whitespace or control character is refused.
    """
    if not target or not target.startswith("/"):
        return None
    if any(ord(ch) < 33 or ord(ch) == 127 for ch in target) or "\\" in target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or target.startswith("//"):
        return None
    return target


@auth_bp.route("/login", methods=["GET"])
def login_get():
    """Render the login page."""
    if current_user.is_authenticated:
        return redirect(current_app.config["LOGIN_SUCCESS_REDIRECT"])
    return render_template("login.html", next=safe_next(request.args.get("next")))


@auth_bp.route("/login", methods=["POST"])
def login_post():
    """
    Sign in with email and password.

    Validation errors and rejected credentials are flashed under "error"
    and send the browser back to the login page. A session that cannot be
    established is logged and otherwise ignored; the login still counts.
    """
    failure_url = current_app.config["LOGIN_FAILURE_REDIRECT"]

    email, password, errors = validate_login_form(request.form)
    if errors:
        flash(errors, "error")
        return redirect(failure_url)

    email = normalize_email(email)
    user, info = authenticate("local", email=email, password=password)

    if not user:
        flash(info or {"msg": INVALID_CREDENTIALS_MSG}, "error")
        return redirect(failure_url)

    if not login_user(user, remember=bool(request.form.get("remember"))):
        logger.warning("[ERR] Session not established for: %s", email)

    logger.info("[OK] User logged in: %s", email)
    flash({"msg": LOGIN_SUCCESS_MSG}, "success")
    return redirect(
        safe_next(request.args.get("next"))
        or current_app.config["LOGIN_SUCCESS_REDIRECT"]
    )


@auth_bp.route("/logout", methods=["GET"])
def logout():
    """End the session and go home."""
    logout_user()
    return redirect("/")
