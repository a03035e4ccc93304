from flask import Blueprint, current_app, jsonify, request, session

from . import _field, _form, _store, _tz
from ..exceptions import (
    InvalidDateRangeError,
    RentalNotFoundError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from ..models.rental import same_time_kind, whole_hours_between
from ..services.common import canonical_type, parse_datetime
from ..utils.constants import Role
from ..utils.decorators import login_required, role_required
from ..utils.filters import fmt_money, rental_row, vehicle_row

bp = Blueprint("rentals", __name__, url_prefix="/")


def _date_range(form):
    """Parse and pre-check the start/expected_return pair from a rent or quote form."""
    start = parse_datetime(form.get("start"))
    end = parse_datetime(form.get("expected_return"))
    if start is None or end is None:
        raise InvalidDateRangeError("Please select valid dates")
    if not same_time_kind(start, end):
        raise InvalidDateRangeError("Start and return must both carry a UTC offset, or neither")
    if end <= start:
        raise InvalidDateRangeError("Return date must be after start date")
    max_hours = int(current_app.config["MAX_RENTAL_HOURS"])
    if whole_hours_between(start, end) < 1:
        raise InvalidDateRangeError("Rental must last at least one hour")
    if whole_hours_between(start, end) > max_hours:
        raise InvalidDateRangeError(f"Maximum rental period is {max_hours // 24} days ({max_hours} hours)")
    return start, end


def _own_rental(rental_id):
    """The logged-in customer's rental, or RentalNotFoundError."""
    rental = _store().rentals.get_by_id(rental_id)
    if rental is None or rental.customer_username != session.get("username"):
        raise RentalNotFoundError(f"Error: rental '{rental_id}' not found")
    return rental


@bp.get("/vehicles")
@login_required
def list_vehicles():
    """Vehicles a customer can see: Available and Under Maintenance, with ?q= and ?type= filters."""
    vehicles = _store().vehicles
    q = (request.args.get("q") or "").strip().lower()
    vtype = canonical_type(request.args.get("type"))

    rows = vehicles.list_available()
    if q:
        rows = [v for v in rows if q in v.name.lower()]
    if vtype:
        rows = [v for v in rows if v.type == vtype]
    return jsonify(ok=True, vehicles=[vehicle_row(v) for v in rows])


@bp.get("/vehicles/<vid>")
@login_required
def vehicle_detail(vid):
    v = _store().vehicles.get_by_id(vid)
    if v is None:
        raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
    return jsonify(ok=True, vehicle=vehicle_row(v), rentable=v.is_rentable)


@bp.post("/quote")
@role_required(Role.CUSTOMER)
def quote():
    """Cost preview for the rent form; same formula as the committed rental."""
    form = _form()
    vid = _field(form, "vehicle_id")
    start, end = _date_range(form)
    ledger = _store().rentals
    if ledger.vehicles.get_by_id(vid) is None:
        raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
    cost = ledger.quote(vid, start, end)
    if cost is None:
        raise InvalidDateRangeError("Rental must last at least one hour")
    hours = whole_hours_between(start, end)
    return jsonify(ok=True, vehicle_id=vid, hours=hours, total_cost=fmt_money(cost))


@bp.post("/rent")
@role_required(Role.CUSTOMER)
def rent_vehicle():
    """Create a rental for the current customer."""
    form = _form()
    vid = _field(form, "vehicle_id")
    start, end = _date_range(form)
    username = session["username"]
    ledger = _store().rentals

    ok, msg = ledger.check_rental(username, vid, start, end)
    if not ok:
        if ledger.vehicles.get_by_id(vid) is None:
            raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
        raise VehicleUnavailableError(msg)

    rental = ledger.rent_vehicle(username, vid, start, end)
    if rental is None:
        raise VehicleUnavailableError("Failed to rent vehicle. It may have been rented by someone else.")
    return jsonify(ok=True, message="Rental Successful!", rental=rental_row(rental, _tz())), 201


@bp.post("/return")
@role_required(Role.CUSTOMER)
def return_submit():
    rid = _field(_form(), "rental_id")
    if not rid:
        return jsonify(ok=False, message="Please select a rental to return"), 400
    rental = _own_rental(rid)
    if not rental.is_active:
        return jsonify(ok=False, message=f"This rental has already been {rental.status.lower()}"), 409

    if not _store().rentals.return_vehicle(rid):
        return jsonify(ok=False, message="Failed to process return"), 409
    return jsonify(ok=True, message="Vehicle returned successfully!", rental=rental_row(rental, _tz()))


@bp.post("/lost")
@role_required(Role.CUSTOMER)
def report_lost():
    """Report an active rental's vehicle as lost, with the date it will be given back."""
    form = _form()
    rid = _field(form, "rental_id")
    if not rid:
        return jsonify(ok=False, message="Please select a rental to report as lost"), 400
    give_back = parse_datetime(form.get("give_back_date"))
    if give_back is None:
        raise InvalidDateRangeError("Please select the expected give-back date")
    rental = _own_rental(rid)
    if not rental.is_active:
        return jsonify(ok=False, message="Only active rentals can be reported lost"), 409

    if not _store().rentals.report_as_lost(rid, give_back):
        return jsonify(ok=False, message="Failed to report vehicle as lost"), 409
    return jsonify(ok=True, message="Lost vehicle reported successfully!", rental=rental_row(rental, _tz()))


@bp.get("/rentals")
@role_required(Role.CUSTOMER)
def my_rentals():
    """The current customer's rental history, newest first."""
    rows = _store().rentals.list_by_customer(session["username"])
    tz = _tz()
    return jsonify(ok=True, rentals=[rental_row(r, tz) for r in reversed(rows)])
