import re

from flask import Blueprint, jsonify, session, url_for

from . import _field, _form, _store
from ..utils.constants import MIN_PASSWORD_LENGTH, USERNAME_PATTERN, Role

bp = Blueprint("auth", __name__, url_prefix="/")

# Compile once at module import
USERNAME_RE = re.compile(USERNAME_PATTERN)

DASHBOARDS = {
    Role.ADMIN: "views.admin_dashboard",
    Role.CUSTOMER: "views.customer_dashboard",
}


def _fail(message, status=400):
    return jsonify(ok=False, message=message), status


@bp.post("register")
def register_submit():
    form = _form()
    username = _field(form, "username")
    password = _field(form, "password", strip=False)
    confirm = _field(form, "confirm_password", strip=False) if "confirm_password" in form else password

    # Same checks, same order, as the registration form
    if not username:
        return _fail("Username is required")
    if not password:
        return _fail("Password is required")
    if password != confirm:
        return _fail("Passwords do not match")
    if not USERNAME_RE.match(username):
        return _fail("Username must be 3-20 characters (letters, numbers, underscore)")
    if len(password) < MIN_PASSWORD_LENGTH:
        return _fail(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if not _store().users.register_customer(username, password):
        return _fail("Username already exists", 409)
    return jsonify(ok=True, message="Registration successful. Please login.", username=username), 201


@bp.post("login")
def login_submit():
    form = _form()
    username = _field(form, "username")
    password = _field(form, "password", strip=False)
    if not username:
        return _fail("Username is required")
    if not password:
        return _fail("Password is required")

    account = _store().users.authenticate(username, password)
    if account is None:
        return _fail("Invalid username or password", 401)

    session.clear()
    session["username"] = account.username
    session["role"] = account.role

    dest = DASHBOARDS.get(account.role, "views.customer_dashboard")
    return jsonify(ok=True, username=account.username, role=account.role, dashboard=url_for(dest))


@bp.get("logout")
def logout():
    session.clear()
    return jsonify(ok=True, message="Logged out")
