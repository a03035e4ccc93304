from __future__ import annotations

from flask import Blueprint, jsonify, request

from . import _field, _form, _store, _tz
from ..exceptions import VehicleNotFoundError, VehicleUnavailableError
from ..services.common import canonical_rental_status, canonical_status, canonical_type, to_float_safe
from ..utils.constants import (
    MAX_PRICE_PER_DAY,
    VEHICLE_NAME_MAX,
    VEHICLE_NAME_MIN,
    Role,
    VehicleStatus,
)
from ..utils.decorators import role_required
from ..utils.filters import rental_row, vehicle_row

bp = Blueprint("admin", __name__, url_prefix="/admin")


def _vehicle_form(form, status_required: bool):
    """
    Validate the add/edit vehicle form.
    Returns (data, None) on success or (None, error message).
    """
    name = _field(form, "name")
    if not name:
        return None, "Please enter vehicle name"
    if not (VEHICLE_NAME_MIN <= len(name) <= VEHICLE_NAME_MAX):
        return None, f"Vehicle name must be {VEHICLE_NAME_MIN}-{VEHICLE_NAME_MAX} characters"

    vtype = canonical_type(form.get("type"))
    if vtype is None:
        return None, "Vehicle type must be Car, Motorbike or Truck"

    price = to_float_safe(form.get("price_per_day"))
    if price is None:
        return None, "Please enter a valid price"
    if price <= 0:
        return None, "Price must be greater than 0"
    if price > MAX_PRICE_PER_DAY:
        return None, f"Price seems too high (max ${MAX_PRICE_PER_DAY:,.0f})"

    raw_status = _field(form, "status")
    if not raw_status:
        status = VehicleStatus.AVAILABLE if status_required else None
    else:
        status = canonical_status(raw_status)
        if status is None:
            return None, "Invalid vehicle status"

    return {"name": name, "type": vtype, "price_per_day": price, "status": status}, None


@bp.get("/vehicles")
@role_required(Role.ADMIN)
def admin_vehicles():
    """All vehicles, optionally narrowed by ?q= (name search) and ?type=."""
    vehicles = _store().vehicles
    q = (request.args.get("q") or "").strip()
    vtype = canonical_type(request.args.get("type"))

    rows = vehicles.search_by_name(q) if q else vehicles.list_all()
    if vtype:
        rows = [v for v in rows if v.type == vtype]
    return jsonify(ok=True, vehicles=[vehicle_row(v) for v in rows])


@bp.post("/vehicles")
@role_required(Role.ADMIN)
def admin_add_vehicle():
    data, error = _vehicle_form(_form(), status_required=True)
    if error:
        return jsonify(ok=False, message=error), 400
    vehicle = _store().vehicles.add_vehicle(**data)
    return jsonify(ok=True, message="Vehicle added successfully!", vehicle=vehicle_row(vehicle)), 201


@bp.post("/vehicles/<vid>")
@role_required(Role.ADMIN)
def admin_update_vehicle(vid):
    """Edit a vehicle; omitting status keeps the current one."""
    data, error = _vehicle_form(_form(), status_required=False)
    if error:
        return jsonify(ok=False, message=error), 400
    vehicles = _store().vehicles
    if not vehicles.update_vehicle(vid, **data):
        raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
    return jsonify(ok=True, message="Vehicle updated successfully!", vehicle=vehicle_row(vehicles.get_by_id(vid)))


@bp.post("/vehicles/<vid>/delete")
@role_required(Role.ADMIN)
def admin_delete_vehicle(vid):
    """
    Delete a vehicle if and only if:
    - the vehicle exists,
    - no active rental references it (checked here against the ledger),
    - its own status is not Rented (checked by the registry).
    """
    store = _store()
    if store.vehicles.get_by_id(vid) is None:
        raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
    if store.rentals.get_active_by_vehicle(vid) is not None:
        raise VehicleUnavailableError("Cannot delete: an active rental exists for this vehicle")
    if not store.vehicles.delete_vehicle(vid):
        raise VehicleUnavailableError("Cannot delete a vehicle while it is Rented")
    return jsonify(ok=True, message="Vehicle deleted successfully!")


@bp.get("/rentals")
@role_required(Role.ADMIN)
def admin_rentals():
    """Rental history, newest first; ?status=Active|Returned|Lost narrows it."""
    ledger = _store().rentals
    raw = (request.args.get("status") or "").strip()
    if raw:
        status = canonical_rental_status(raw)
        if status is None:
            return jsonify(ok=False, message="Rental status must be Active, Returned or Lost"), 400
        rows = ledger.list_by_status(status)
    else:
        rows = ledger.list_all()
    tz = _tz()
    return jsonify(ok=True, rentals=[rental_row(r, tz) for r in reversed(rows)])


@bp.post("/reset")
@role_required(Role.ADMIN)
def admin_reset():
    """Reseed the fleet and clear the ledger. Accounts are kept."""
    _store().reset()
    return jsonify(ok=True, message="Data reset to defaults")
