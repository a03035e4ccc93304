"""
Seed data loaded at startup and on every reset.

The starter fleet is the canonical fixture for tests: ids, names, prices and
statuses are fixed. Two vehicles start Rented with no matching rental record
and two start Under Maintenance.
"""

from .utils.constants import Role, VehicleStatus

# (username, password, role); passwords are hashed when the directory loads them
DEFAULT_ACCOUNTS = (
    ("admin", "admin", Role.ADMIN),
    ("user", "user", Role.CUSTOMER),
)

_A = VehicleStatus.AVAILABLE
_R = VehicleStatus.RENTED
_M = VehicleStatus.MAINTENANCE

# (vehicle_id, name, type, price_per_day, status)
DEFAULT_FLEET = (
    ("V001", "Toyota Camry", "Car", 50.0, _A),
    ("V002", "Honda Civic", "Car", 45.0, _A),
    ("V003", "Yamaha NMAX", "Motorbike", 25.0, _A),
    ("V004", "Ford F-150", "Truck", 80.0, _A),
    ("V005", "Tesla Model 3", "Car", 100.0, _R),
    ("V006", "Kawasaki Ninja", "Motorbike", 35.0, _A),
    ("V007", "Isuzu D-Max", "Truck", 75.0, _A),
    ("V008", "Toyota Corolla", "Car", 48.0, _A),
    ("V009", "Honda Accord", "Car", 65.0, _A),
    ("V010", "Suzuki Hayate", "Motorbike", 20.0, _M),
    ("V011", "Chevrolet Silverado", "Truck", 85.0, _A),
    ("V012", "Toyota Hilux", "Truck", 70.0, _A),
    ("V013", "Nissan Altima", "Car", 55.0, _R),
    ("V014", "Kawasaki Z650", "Motorbike", 40.0, _A),
    ("V015", "Ford Mustang", "Car", 120.0, _A),
    ("V016", "Ford Ranger", "Truck", 78.0, _A),
    ("V017", "Yamaha XMAX", "Motorbike", 30.0, _A),
    ("V018", "Hyundai Elantra", "Car", 42.0, _A),
    ("V019", "Honda PCX", "Motorbike", 28.0, _M),
    ("V020", "Chevrolet Colorado", "Truck", 72.0, _A),
)

# first id handed out by add_vehicle after a reset
NEXT_VEHICLE_NUMBER = len(DEFAULT_FLEET) + 1
