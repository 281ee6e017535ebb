"""
Auth service: session login manager and authentication strategies.

Routes never check credentials themselves. They call
authenticate(<strategy>, **credentials) and get back (user, info):
  user set, info None   → authenticated
  user None, info dict  → rejected, info is {"msg": ...} for flashing
  exception raised      → something broke, let Flask handle it

Strategies:
  local   email + password against the users table
  google  OAuth verify callback, finds the user by google_id or creates it
"""
import logging
import re

from flask_login import LoginManager

from models import db
from models.user import User
from services.validation_service import normalize_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MSG = "Credenciais inválidas"
PROVIDER_ACCOUNT_MSG = (
    "Esta conta foi registrada com um provedor de login. "
    "Entre com o Google para acessá-la."
)
EMAIL_TAKEN_MSG = (
    "Já existe uma conta com este e-mail. "
    "Entre com essa conta usando e-mail e senha."
)

login_manager = LoginManager()
login_manager.login_view = "auth.login_get"
login_manager.login_message_category = "info"

_STRATEGIES = {}


class UnknownStrategyError(KeyError):
    """Raised when authenticate() is asked for a strategy nobody registered."""


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


def strategy(name):
    """Register a verify function under `name`."""
    def decorator(verify):
        _STRATEGIES[name] = verify
        return verify
    return decorator


def authenticate(name, **credentials):
    """
    Run the named strategy.

    Returns:
        (user, info): see module docstring.

    Raises:
        UnknownStrategyError: if no strategy is registered under `name`.
    """
    try:
        verify = _STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name) from None
    return verify(**credentials)


@strategy("local")
def verify_local(email, password):
    """Check an email/password pair. Email is expected already normalized."""
    user = User.find_one(email=email)
    if user is None:
        logger.warning("[ERR] Login attempt for unknown email: %s", email)
        return None, {"msg": INVALID_CREDENTIALS_MSG}

    if not user.password_hash:
        logger.warning("[ERR] Password login for provider-only account: %s", email)
        return None, {"msg": PROVIDER_ACCOUNT_MSG}

    if not user.check_password(password):
        logger.warning("[ERR] Wrong password for: %s", email)
        return None, {"msg": INVALID_CREDENTIALS_MSG}

    return user, None


@strategy("google")
def verify_google(access_token, refresh_token, profile):
    """
    OAuth verify callback for Google.

    Args:
        access_token: Provider access token (unused, accounts keep no tokens).
        refresh_token: Provider refresh token (unused).
        profile: dict with keys id, display_name, email.

    Returns:
        (user, info). An existing google_id match is returned unchanged;
        otherwise a new user is created, unless the email already
        belongs to another account.
    """
    user = User.find_one(google_id=profile["id"])
    if user:
        logger.info("[OK] Google user found: %s", user.email)
        return user, None

    email = normalize_email(profile.get("email")) or None
    if email and User.find_one(email=email):
        logger.warning("[ERR] Google sign-up with email already in use: %s", email)
        return None, {"msg": EMAIL_TAKEN_MSG}

    user = User(
        google_id=profile["id"],
        name=profile.get("display_name") or "",
        email=email,
        username=unique_username(email, profile.get("display_name")),
    )
    user.save()
    logger.info("[OK] Google user created: %s (username=%s)", email, user.username)
    return user, None


def unique_username(email, display_name=None):
    """
    Derive a username not yet taken.

    Uses the email local part, else the display name, else "user";
    appends 2, 3, ... until no existing user has it.
    """
    source = (email or "").split("@", 1)[0] or display_name or ""
    base = re.sub(r"[^a-z0-9._-]", "", source.lower().replace(" ", ".")) or "user"

    candidate = base
    suffix = 1
    while User.find_one(username=candidate):
        suffix += 1
        candidate = f"{base}{suffix}"
    return candidate
