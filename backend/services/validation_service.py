"""
Validation service: login form assertions and email sanitizing.

validate_login_form runs every assertion and collects each failure as a
{"msg": ...} dict, in assertion order:
  email is an email address
  email is not blank
  password is not blank

No failures → errors is None, so callers can write `if errors:`.
"""
import re

EMAIL_INVALID_MSG = "O e-mail inserido não é válido"
EMAIL_BLANK_MSG = "O e-mail não pode ficar em branco"
PASSWORD_BLANK_MSG = "A senha não pode ficar em branco"

# local@domain.tld, no whitespace, exactly one @
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]{2,}$")
MAX_EMAIL_LENGTH = 254

GMAIL_DOMAINS = ("gmail.com", "googlemail.com")


def is_email(value):
    """True if value looks like a deliverable email address."""
    value = value or ""
    if len(value) > MAX_EMAIL_LENGTH:
        return False
    return bool(EMAIL_RE.match(value))


def normalize_email(email):
    """
    Canonicalize an email address for lookups.

    Lowercases the whole address. For Gmail, also drops any +subaddress
    and maps googlemail.com to gmail.com. Dots in Gmail local parts are
    kept, since other accounts may have been stored with them.

    Returns the input unchanged if it is not an email address.
    """
    email = (email or "").strip()
    if not is_email(email):
        return email

    local, domain = email.lower().rsplit("@", 1)
    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0]
        domain = "gmail.com"
    return f"{local}@{domain}"


def validate_login_form(form):
    """
    Validate the email/password login form.

    Args:
        form: Mapping of submitted fields (request.form).

    Returns:
        Tuple (email, password, errors). errors is a list of {"msg": ...}
        dicts, or None when the form is valid.
    """
    email = (form.get("email") or "").strip()
    password = form.get("password") or ""

    errors = []
    if not is_email(email):
        errors.append({"msg": EMAIL_INVALID_MSG})
    if not email:
        errors.append({"msg": EMAIL_BLANK_MSG})
    if not password:
        errors.append({"msg": PASSWORD_BLANK_MSG})

    return email, password, errors or None
