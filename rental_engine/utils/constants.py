# rental_engine/utils/constants.py

"""
Global constants for roles, statuses, id formats and limits.
These constants are imported by models, services and controllers.
"""

# Display format for timestamps (rental start/expected return)
DATETIME_FMT = "%Y-%m-%d %H:%M"


class Role:
    ADMIN = "Admin"
    CUSTOMER = "Customer"


class RentalStatus:
    ACTIVE = "Active"
    RETURNED = "Returned"
    LOST = "Lost"


class VehicleStatus:
    AVAILABLE = "Available"
    RENTED = "Rented"
    MAINTENANCE = "Under Maintenance"
    LOST = "Lost"


# Statuses that count toward "available" in fleet reporting.
# Only AVAILABLE is actually rentable.
AVAILABLE_FOR_REPORTING = {VehicleStatus.AVAILABLE, VehicleStatus.MAINTENANCE}

ALL_VEHICLE_STATUSES = (
    VehicleStatus.AVAILABLE,
    VehicleStatus.RENTED,
    VehicleStatus.MAINTENANCE,
    VehicleStatus.LOST,
)

ALL_RENTAL_STATUSES = (RentalStatus.ACTIVE, RentalStatus.RETURNED, RentalStatus.LOST)

# --- Vehicle types offered by the admin forms ---
ALLOWED_TYPES = ("Car", "Motorbike", "Truck")

# --- Id allocation ---
VEHICLE_ID_FMT = "V{:03d}"
RENTAL_ID_FMT = "R{:04d}"
FIRST_RENTAL_NUMBER = 1001

# --- Business limits ---
MAX_ACTIVE_RENTALS = 3
MAX_RENTAL_HOURS = 720  # 30 days

# --- Form rules ---
USERNAME_PATTERN = r"^[a-zA-Z0-9_]{3,20}$"
MIN_PASSWORD_LENGTH = 4
VEHICLE_NAME_MIN = 2
VEHICLE_NAME_MAX = 50
MAX_PRICE_PER_DAY = 10000.0

# --- App config defaults (override via create_app(config) or RENTAL_* env vars) ---
DEFAULT_CONFIG = {
    "SECRET_KEY": "dev-secret-change-me",
    "DISPLAY_TIMEZONE": "Pacific/Auckland",
    "MAX_ACTIVE_RENTALS": MAX_ACTIVE_RENTALS,
    "MAX_RENTAL_HOURS": MAX_RENTAL_HOURS,
}
