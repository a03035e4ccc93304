"""Helpers shared by the blueprints."""

from flask import current_app, request

from ..models.store import Store


def _store() -> Store:
    """The Store built by create_app for this application."""
    return current_app.extensions["rental_store"]


def _form():
    """Request payload from a JSON object body or an HTML form post."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else request.form


def _field(form, key, strip=True) -> str:
    """A form value as text; missing or null reads as ""."""
    value = form.get(key)
    if value is None:
        return ""
    value = str(value)
    return value.strip() if strip else value


def _tz():
    return current_app.config.get("DISPLAY_TIMEZONE")
