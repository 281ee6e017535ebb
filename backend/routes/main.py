"""
Page routes.

GET /        : home page
GET /account : signed-in user's details (login required)
"""
from flask import Blueprint, render_template
from flask_login import current_user, login_required

# Page templates live in routes/templates so they ship with the package
main_bp = Blueprint("main", __name__, template_folder="templates")


@main_bp.route("/", methods=["GET"])
def index():
    return render_template("home.html")


@main_bp.route("/account", methods=["GET"])
@login_required
def account():
    """Show the current user's stored profile."""
    return render_template("account.html", user=current_user.to_dict())
