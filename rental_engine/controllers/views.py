from flask import Blueprint, jsonify, session, url_for

from . import _store, _tz
from ..services.analytics_service import AnalyticsService
from ..utils.constants import Role
from ..utils.decorators import login_required, role_required
from ..utils.filters import rental_row, vehicle_row

bp = Blueprint("views", __name__)


@bp.get("/")
@login_required
def home():
    role = session.get("role")
    dest = "views.admin_dashboard" if role == Role.ADMIN else "views.customer_dashboard"
    return jsonify(ok=True, username=session.get("username"), role=role, dashboard=url_for(dest))


@bp.get("/dashboard/admin")
@role_required(Role.ADMIN)
def admin_dashboard():
    store = _store()
    data = AnalyticsService.analytics(store.vehicles, store.rentals)
    return jsonify(ok=True, **data)


@bp.get("/dashboard/customer")
@role_required(Role.CUSTOMER)
def customer_dashboard():
    store = _store()
    username = session["username"]
    tz = _tz()
    active = store.rentals.list_active_by_customer(username)
    return jsonify(
        ok=True,
        username=username,
        active_rentals=[rental_row(r, tz) for r in active],
        rental_count=len(store.rentals.list_by_customer(username)),
        slots_left=max(0, store.rentals.max_active_per_customer - len(active)),
        available_vehicles=[vehicle_row(v) for v in store.vehicles.list_available()],
    )
